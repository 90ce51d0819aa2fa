import re

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _

HASHTAG_RE = re.compile(r"#(\w+)")
MENTION_RE = re.compile(r"@([a-zA-Z0-9_.-]{3,30})")


def extract_hashtags(text: str) -> list[str]:
    """Lowercased hashtags in order of first appearance, without the ``#``."""
    return list(dict.fromkeys(tag.lower() for tag in HASHTAG_RE.findall(text or "")))


def extract_mentions(text: str) -> list[str]:
    return list(dict.fromkeys(MENTION_RE.findall(text or "")))


class ReelQuerySet(models.QuerySet):
    def published(self):
        return self.filter(is_published=True, is_archived=False)

    def visible_to(self, user):
        return self.published().filter(
            Q(privacy=Reel.Privacy.PUBLIC)
            | Q(user=user)
            | Q(privacy=Reel.Privacy.FOLLOWERS, user__followers=user),
        ).distinct()


class Reel(models.Model):
    class AspectRatio(models.TextChoices):
        PORTRAIT = "9:16", _("Portrait")
        SQUARE = "1:1", _("Square")
        LANDSCAPE = "16:9", _("Landscape")

    class Privacy(models.TextChoices):
        PUBLIC = "public", _("Public")
        FOLLOWERS = "followers", _("Followers")
        PRIVATE = "private", _("Private")

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reels",
    )
    video_url = models.URLField(max_length=500)
    thumbnail_url = models.URLField(max_length=500)
    caption = models.TextField(max_length=2200, blank=True, default="")
    music = models.CharField(max_length=200, blank=True, default="")
    duration = models.PositiveIntegerField(help_text=_("Length in seconds"))
    aspect_ratio = models.CharField(
        max_length=5,
        choices=AspectRatio.choices,
        default=AspectRatio.PORTRAIT,
    )
    likes = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="liked_reels",
        blank=True,
    )
    like_count = models.PositiveIntegerField(default=0)
    comment_count = models.PositiveIntegerField(default=0)
    share_count = models.PositiveIntegerField(default=0)
    views = models.PositiveIntegerField(default=0)
    is_archived = models.BooleanField(default=False)
    is_comments_disabled = models.BooleanField(default=False)
    hashtags = models.JSONField(default=list, blank=True)
    mentions = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="mentioned_in_reels",
        blank=True,
    )
    privacy = models.CharField(
        max_length=10,
        choices=Privacy.choices,
        default=Privacy.PUBLIC,
    )
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ReelQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="reel_user_created_idx"),
            models.Index(fields=["-like_count"], name="reel_like_count_idx"),
        ]

    def __str__(self):
        return f"Reel {self.pk} by {self.user}"

    def save(self, *args, **kwargs):
        self.hashtags = extract_hashtags(self.caption)
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "caption" in update_fields:
            kwargs["update_fields"] = {*update_fields, "hashtags"}
        super().save(*args, **kwargs)


class ReelComment(models.Model):
    reel = models.ForeignKey(Reel, on_delete=models.CASCADE, related_name="comments")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="reel_comments",
    )
    content = models.CharField(max_length=500)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]

    def __str__(self):
        return f"Comment {self.pk} on reel {self.reel_id}"
