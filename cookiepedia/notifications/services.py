from __future__ import annotations

import logging
from functools import partial

from django.db import transaction

from cookiepedia.realtime.events.notifications import publish_notification_created

from .models import Notification

logger = logging.getLogger(__name__)


def create_notification(
    *,
    recipient_id: int,
    sender_id: int,
    notification_type: str,
    message_id: int | None = None,
    conversation_id: int | None = None,
    reel_id: int | None = None,
    comment_id: int | None = None,
) -> Notification:
    """Persist one notification record. Repeated calls create repeated records."""

    return Notification.objects.create(
        recipient_id=recipient_id,
        sender_id=sender_id,
        notification_type=notification_type,
        message_id=message_id,
        conversation_id=conversation_id,
        reel_id=reel_id,
        comment_id=comment_id,
    )


def notify_user(
    *,
    recipient_id: int,
    sender_id: int,
    notification_type: str,
    **refs: int | None,
) -> Notification | None:
    """Create a notification from sync code and push it once the transaction commits.

    Users are not notified about their own actions.
    """

    if recipient_id == sender_id:
        return None

    notification = create_notification(
        recipient_id=recipient_id,
        sender_id=sender_id,
        notification_type=notification_type,
        **refs,
    )
    logger.debug(
        "Queued %s notification %s for user %s",
        notification_type,
        notification.pk,
        recipient_id,
    )
    transaction.on_commit(partial(publish_notification_created, notification))
    return notification
