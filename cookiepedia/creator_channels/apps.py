from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class CreatorChannelsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cookiepedia.creator_channels"
    label = "creator_channels"
    verbose_name = _("Creator channels")
