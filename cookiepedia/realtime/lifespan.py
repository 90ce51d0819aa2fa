"""ASGI lifespan handler tying the realtime hub to server start and stop."""

import logging

from django.apps import apps

logger = logging.getLogger(__name__)


async def lifespan_app(scope, receive, send):
    hub = apps.get_app_config("realtime").hub
    while True:
        message = await receive()
        if message["type"] == "lifespan.startup":
            hub.start()
            await send({"type": "lifespan.startup.complete"})
        elif message["type"] == "lifespan.shutdown":
            await hub.stop()
            await send({"type": "lifespan.shutdown.complete"})
            return
