from django.apps import apps
from django.urls import path

from . import consumers

websocket_urlpatterns = [
    path(
        "ws/relay/",
        consumers.RelayConsumer.as_asgi(hub=apps.get_app_config("realtime").hub),
    ),
]
