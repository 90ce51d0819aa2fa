from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from asgiref.sync import async_to_sync
from django.apps import apps

from .envelopes import EventKind
from .envelopes import envelope

if TYPE_CHECKING:  # import for type checking only
    from cookiepedia.notifications.models import Notification
    from cookiepedia.realtime.hub import RealtimeHub

logger = logging.getLogger(__name__)


def build_notification_payload(notification: Notification) -> dict[str, Any]:
    return {
        "id": notification.id,
        "type": notification.notification_type,
        "recipient": notification.recipient_id,
        "sender": notification.sender_id,
        "messageId": notification.message_id,
        "conversationId": notification.conversation_id,
        "reelId": notification.reel_id,
        "commentId": notification.comment_id,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
    }


def notification_envelope(notification: Notification) -> dict[str, Any]:
    return envelope(
        EventKind.NOTIFICATION,
        notification=build_notification_payload(notification),
    )


def publish_notification_created(
    notification: Notification,
    hub: RealtimeHub | None = None,
) -> bool:
    """Push a newly created Notification to its recipient from sync code."""

    if hub is None:
        hub = apps.get_app_config("realtime").hub
    delivered = async_to_sync(hub.push)(
        notification.recipient_id,
        notification_envelope(notification),
    )
    if not delivered:
        logger.debug(
            "User %s offline, notification %s stored only",
            notification.recipient_id,
            notification.id,
        )
    return delivered
