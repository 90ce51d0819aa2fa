"""Realtime relay service.

A single ``RealtimeHub`` owns the connection registry and the presence
sweeper. Websocket consumers hand it every authenticated connection and every
decoded client event; REST code reaches it through
``publish_notification_created``.

Delivery is at most once: events are persisted first and then pushed to the
target's connection if it is currently registered. Nothing is queued for
offline users.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any

from channels.db import database_sync_to_async
from django.conf import settings
from django.db import DatabaseError

from cookiepedia.messaging import services as messaging
from cookiepedia.messaging.models import Conversation
from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import create_notification

from .events.envelopes import EventKind
from .events.envelopes import UserStatus
from .events.envelopes import envelope
from .events.envelopes import status_event
from .events.notifications import notification_envelope
from .events.serializers import InboundEventSerializer
from .events.serializers import MessageEventSerializer
from .events.serializers import MessageReadEventSerializer
from .events.serializers import TypingEventSerializer
from .registry import Connection
from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


@database_sync_to_async
def _is_participant(conversation_id: int, user_id: int) -> bool:
    return messaging.is_participant(conversation_id, user_id)


@database_sync_to_async
def _store_message(sender_id: int, data: dict[str, Any]) -> dict[str, Any]:
    message = messaging.store_message(
        conversation_id=data["conversation_id"],
        sender_id=sender_id,
        content=data["content"],
        kind=data["kind"],
    )
    return messaging.message_payload(message, read_by=[sender_id])


@database_sync_to_async
def _record_read(message_id: int, reader_id: int) -> tuple[int, list[int]] | None:
    message = messaging.add_reader(message_id, reader_id)
    if message is None:
        return None
    return message.sender_id, message.read_by_ids()


@database_sync_to_async
def _create_notification(**kwargs: Any) -> Notification:
    return create_notification(**kwargs)


class RealtimeHub:
    def __init__(
        self,
        *,
        registry: ConnectionRegistry | None = None,
        sweep_interval: float | None = None,
        enforce_participants: bool | None = None,
    ) -> None:
        self.registry = registry if registry is not None else ConnectionRegistry()
        if sweep_interval is None:
            sweep_interval = settings.REALTIME_SWEEP_INTERVAL
        if enforce_participants is None:
            enforce_participants = settings.REALTIME_ENFORCE_PARTICIPANTS
        self.sweep_interval = float(sweep_interval)
        self.enforce_participants = bool(enforce_participants)
        self._sweeper: asyncio.Task | None = None

    # Lifecycle

    @property
    def running(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start(self) -> None:
        """Schedule the presence sweeper on the running loop. Idempotent."""

        if self.running:
            return
        self._sweeper = asyncio.get_running_loop().create_task(
            self._sweep_forever(),
            name="realtime-presence-sweeper",
        )
        logger.info("Presence sweeper started (every %ss)", self.sweep_interval)

    async def stop(self) -> None:
        """Cancel the sweeper and drop every registered connection."""

        task, self._sweeper = self._sweeper, None
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        dropped = len(self.registry)
        self.registry.clear()
        logger.info("Realtime hub stopped, %s connection(s) dropped", dropped)

    async def _sweep_forever(self) -> None:
        while True:
            await asyncio.sleep(self.sweep_interval)
            self.sweep()

    def sweep(self) -> list[int]:
        """Evict registry entries whose connection reports closed."""

        evicted = []
        for identity, connection in self.registry.entries():
            if connection.is_open:
                continue
            if self.registry.unregister(identity, connection):
                evicted.append(identity)
                logger.info("%s", status_event(identity, UserStatus.OFFLINE))
        return evicted

    # Connections

    def connect(self, identity: int, connection: Connection) -> None:
        displaced = self.registry.register(identity, connection)
        if displaced is not None:
            logger.info("User %s reconnected, previous connection replaced", identity)
        logger.info("%s", status_event(identity, UserStatus.ONLINE))

    def disconnect(self, identity: int, connection: Connection) -> None:
        if self.registry.unregister(identity, connection):
            logger.info("%s", status_event(identity, UserStatus.OFFLINE))

    async def push(self, identity: int, event: dict[str, Any]) -> bool:
        """Send ``event`` to the user's connection. False when offline."""

        connection = self.registry.lookup(identity)
        if connection is None or not connection.is_open:
            return False
        try:
            await connection.send_json(event)
        except Exception:
            logger.exception(
                "Failed to push %s to user %s",
                event.get("kind"),
                identity,
            )
            return False
        return True

    # Client events

    async def dispatch(self, sender_id: int, content: Any) -> None:
        """Route one decoded client event. Invalid events are logged and dropped."""

        if not isinstance(content, dict):
            logger.warning("Dropping non-object event from user %s", sender_id)
            return
        serializer = InboundEventSerializer(data=content)
        if not serializer.is_valid():
            logger.warning(
                "Dropping event from user %s: %s",
                sender_id,
                serializer.errors,
            )
            return

        kind = serializer.validated_data["kind"]
        if kind == EventKind.MESSAGE:
            await self.relay(sender_id, content)
        elif kind == EventKind.MESSAGE_READ:
            await self.mark_read(sender_id, content)
        else:
            await self.forward_typing(sender_id, content)

    async def relay(
        self,
        sender_id: int,
        event: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Persist a chat message, then deliver it and notify the recipient.

        Returns the message payload, or None when the event was dropped.
        """

        serializer = MessageEventSerializer(data=event)
        if not serializer.is_valid():
            logger.warning(
                "Dropping malformed MESSAGE from user %s: %s",
                sender_id,
                serializer.errors,
            )
            return None
        data = serializer.validated_data
        conversation_id = data["conversation_id"]
        recipient_id = data["recipient_id"]

        try:
            if self.enforce_participants and not await _is_participant(
                conversation_id,
                sender_id,
            ):
                logger.warning(
                    "User %s is not a participant of conversation %s",
                    sender_id,
                    conversation_id,
                )
                return None
            message = await _store_message(sender_id, data)
        except Conversation.DoesNotExist:
            logger.warning(
                "Dropping MESSAGE from user %s: conversation %s not found",
                sender_id,
                conversation_id,
            )
            return None
        except DatabaseError:
            logger.exception("Failed to persist message from user %s", sender_id)
            return None

        outgoing = envelope(
            EventKind.MESSAGE,
            message=message,
            conversationId=conversation_id,
        )
        await self.push(recipient_id, outgoing)
        await self.push(sender_id, {**outgoing, "isOwnMessage": True})
        await self.notify(
            recipient_id,
            Notification.Type.MESSAGE,
            sender_id,
            message_id=message["id"],
            conversation_id=conversation_id,
        )
        return message

    async def notify(
        self,
        recipient_id: int,
        notification_type: str,
        sender_id: int,
        **refs: int | None,
    ) -> Notification | None:
        """Store a notification and push it if the recipient is connected."""

        try:
            notification = await _create_notification(
                recipient_id=recipient_id,
                sender_id=sender_id,
                notification_type=notification_type,
                **refs,
            )
        except DatabaseError:
            logger.exception(
                "Failed to store %s notification for user %s",
                notification_type,
                recipient_id,
            )
            return None
        await self.push(recipient_id, notification_envelope(notification))
        return notification

    async def mark_read(
        self,
        reader_id: int,
        event: dict[str, Any],
    ) -> list[int] | None:
        """Add the reader to a message's read-by set and tell the sender.

        Unknown messages are ignored. Returns the read-by ids on success.
        """

        serializer = MessageReadEventSerializer(data=event)
        if not serializer.is_valid():
            logger.warning(
                "Dropping malformed MESSAGE_READ from user %s: %s",
                reader_id,
                serializer.errors,
            )
            return None
        data = serializer.validated_data

        try:
            result = await _record_read(data["message_id"], reader_id)
        except DatabaseError:
            logger.exception("Failed to record read receipt for user %s", reader_id)
            return None
        if result is None:
            logger.debug("Read receipt for unknown message %s", data["message_id"])
            return None

        sender_id, read_by = result
        await self.push(
            sender_id,
            envelope(
                EventKind.MESSAGE_READ,
                messageId=data["message_id"],
                readBy=read_by,
                conversationId=data["conversation_id"],
            ),
        )
        return read_by

    async def forward_typing(self, sender_id: int, event: dict[str, Any]) -> bool:
        serializer = TypingEventSerializer(data=event)
        if not serializer.is_valid():
            logger.warning(
                "Dropping malformed TYPING from user %s: %s",
                sender_id,
                serializer.errors,
            )
            return False
        data = serializer.validated_data
        return await self.push(
            data["recipient_id"],
            envelope(
                EventKind.TYPING,
                senderId=sender_id,
                conversationId=data["conversation_id"],
                isTyping=True,
            ),
        )
