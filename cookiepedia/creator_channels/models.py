from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Channel(models.Model):
    """A creator profile. Every user owns at most one channel."""

    class Privacy(models.TextChoices):
        PUBLIC = "public", _("Public")
        PRIVATE = "private", _("Private")
        RESTRICTED = "restricted", _("Restricted")

    owner = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="channel",
    )
    name = models.CharField(max_length=50)
    description = models.CharField(max_length=200, blank=True, default="")
    avatar = models.CharField(max_length=500, blank=True, default="")
    cover_photo = models.CharField(max_length=500, blank=True, default="")
    is_verified = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    subscribers = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="subscribed_channels",
        blank=True,
    )
    content_count = models.PositiveIntegerField(default=0)
    social_links = models.JSONField(default=dict, blank=True)
    privacy = models.CharField(
        max_length=20,
        choices=Privacy.choices,
        default=Privacy.PUBLIC,
    )
    comment_moderation = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def subscription_count(self) -> int:
        return self.subscribers.count()
