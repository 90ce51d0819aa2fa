from __future__ import annotations

import enum
import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.apps import apps

from .auth import AUTH_FAILED_CLOSE_CODE
from .auth import authenticate

logger = logging.getLogger(__name__)


class ConnectionState(enum.Enum):
    CONNECTING = "connecting"
    AUTHENTICATED = "authenticated"
    CLOSED = "closed"


class RelayConsumer(AsyncJsonWebsocketConsumer):
    """Websocket endpoint of the realtime relay.

    The hub is injected through ``RelayConsumer.as_asgi(hub=...)``; without
    one, the process-wide hub of the realtime app is used.
    """

    def __init__(self, *args, hub=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.hub = hub
        self.identity: int | None = None
        self.state = ConnectionState.CONNECTING

    @property
    def is_open(self) -> bool:
        return self.state is ConnectionState.AUTHENTICATED

    async def connect(self):
        if self.hub is None:
            self.hub = apps.get_app_config("realtime").hub
        self.hub.start()

        user = await authenticate(self.scope)
        # Accept first so the client sees the policy-violation close code.
        await self.accept()
        if user is None:
            self.state = ConnectionState.CLOSED
            await self.close(code=AUTH_FAILED_CLOSE_CODE)
            return

        self.scope["user"] = user
        self.identity = user.pk
        self.state = ConnectionState.AUTHENTICATED
        self.hub.connect(self.identity, self)

    async def disconnect(self, code):
        previous, self.state = self.state, ConnectionState.CLOSED
        if previous is ConnectionState.AUTHENTICATED:
            self.hub.disconnect(self.identity, self)
        logger.debug("Realtime socket for user %s closed (%s)", self.identity, code)

    async def receive(self, text_data=None, bytes_data=None, **kwargs):
        if text_data is None:
            logger.warning("Dropping binary frame from user %s", self.identity)
            return
        try:
            content = await self.decode_json(text_data)
        except ValueError:
            logger.warning("Dropping non-JSON frame from user %s", self.identity)
            return
        await self.receive_json(content, **kwargs)

    async def receive_json(self, content, **kwargs):
        if self.state is not ConnectionState.AUTHENTICATED:
            return
        await self.hub.dispatch(self.identity, content)
