from django.contrib.auth.models import AbstractUser
from django.core.validators import MinLengthValidator
from django.core.validators import RegexValidator
from django.db import models
from django.db.models import CharField
from django.db.models import EmailField
from django.urls import reverse
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

SOCIAL_PLATFORMS = ("youtube", "instagram", "twitter", "tiktok", "facebook")

username_validator = RegexValidator(
    r"^[a-zA-Z0-9_.-]+$",
    _("Username can only contain letters, numbers, dots, underscores and hyphens"),
)


def default_notification_settings() -> dict[str, bool]:
    return {
        "email": True,
        "push": True,
        "new_follower": True,
        "new_comment": True,
        "mentions": True,
    }


class User(AbstractUser):
    """
    Default custom user model for Cookiepedia.

    The follow graph lives on ``following``; ``followers`` is its reverse
    accessor, so both directions stay consistent by construction.
    """

    class Role(models.TextChoices):
        USER = "user", _("User")
        CREATOR = "creator", _("Creator")
        ADMIN = "admin", _("Admin")

    class ProfileVisibility(models.TextChoices):
        PUBLIC = "public", _("Public")
        FOLLOWERS = "followers", _("Followers")
        PRIVATE = "private", _("Private")

    username = CharField(
        _("username"),
        max_length=30,
        unique=True,
        validators=[MinLengthValidator(3), username_validator],
        error_messages={"unique": _("A user with that username already exists.")},
    )
    email = EmailField(_("email address"), unique=True)
    # First and last name do not cover name patterns around the globe
    name = CharField(_("Full Name"), blank=True, max_length=50)
    bio = CharField(max_length=150, blank=True, default="")
    website = CharField(max_length=255, blank=True, default="")
    profile_picture = CharField(max_length=500, default="/default-avatar.png")
    cover_photo = CharField(max_length=500, default="/default-cover.jpg")
    is_verified = models.BooleanField(default=False)
    role = CharField(max_length=20, choices=Role.choices, default=Role.USER)
    last_active = models.DateTimeField(default=timezone.now)
    social_links = models.JSONField(default=dict, blank=True)
    profile_viewable = CharField(
        max_length=20,
        choices=ProfileVisibility.choices,
        default=ProfileVisibility.PUBLIC,
    )
    show_online_status = models.BooleanField(default=True)
    notification_settings = models.JSONField(
        default=default_notification_settings,
        blank=True,
    )
    following = models.ManyToManyField(
        "self",
        symmetrical=False,
        related_name="followers",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def get_absolute_url(self) -> str:
        """Get URL for user's profile endpoint.

        Returns:
            str: URL for user detail.

        """
        return reverse("api_v1:user-detail", kwargs={"username": self.username})

    @property
    def followers_count(self) -> int:
        return self.followers.count()

    @property
    def following_count(self) -> int:
        return self.following.count()

    def is_following(self, other: "User") -> bool:
        return self.following.filter(pk=other.pk).exists()

    def can_view_profile(self, viewer) -> bool:
        if getattr(viewer, "pk", None) == self.pk:
            return True
        if self.profile_viewable == self.ProfileVisibility.PRIVATE:
            return False
        if self.profile_viewable == self.ProfileVisibility.FOLLOWERS:
            return bool(
                getattr(viewer, "is_authenticated", False)
                and self.followers.filter(pk=viewer.pk).exists()
            )
        return True
