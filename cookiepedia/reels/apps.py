from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ReelsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cookiepedia.reels"
    verbose_name = _("Reels")
