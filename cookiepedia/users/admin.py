from django.contrib import admin
from django.contrib.auth import admin as auth_admin
from django.utils.translation import gettext_lazy as _

from .models import User


@admin.register(User)
class UserAdmin(auth_admin.UserAdmin):
    fieldsets = (
        (None, {"fields": ("username", "password")}),
        (_("Personal info"), {"fields": ("name", "email", "bio", "website")}),
        (
            _("Profile"),
            {
                "fields": (
                    "profile_picture",
                    "cover_photo",
                    "social_links",
                    "role",
                    "is_verified",
                    "following",
                ),
            },
        ),
        (
            _("Privacy"),
            {
                "fields": (
                    "profile_viewable",
                    "show_online_status",
                    "notification_settings",
                ),
            },
        ),
        (
            _("Permissions"),
            {
                "fields": (
                    "is_active",
                    "is_staff",
                    "is_superuser",
                    "groups",
                    "user_permissions",
                ),
            },
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "last_active")}),
    )
    list_display = ["username", "name", "email", "role", "is_verified", "is_superuser"]
    search_fields = ["username", "name", "email"]
    list_filter = ["role", "is_verified", "is_staff", "is_active"]
    filter_horizontal = ["groups", "user_permissions", "following"]
