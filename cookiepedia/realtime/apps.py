from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RealtimeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cookiepedia.realtime"
    verbose_name = _("Realtime")

    hub = None

    def ready(self):
        from .hub import RealtimeHub  # noqa: PLC0415

        # One hub per process; started lazily on the ASGI event loop.
        self.hub = RealtimeHub()
