from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F

from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import notify_user

from .models import Reel
from .models import ReelComment
from .models import extract_mentions

logger = logging.getLogger(__name__)


def _mentioned_users(text: str, *, exclude_id: int):
    usernames = extract_mentions(text)
    if not usernames:
        return []
    users = get_user_model().objects.filter(username__in=usernames, is_active=True)
    return [user for user in users if user.pk != exclude_id]


def _notify_mentions(users, *, sender_id: int, reel: Reel, comment=None) -> None:
    for user in users:
        notify_user(
            recipient_id=user.pk,
            sender_id=sender_id,
            notification_type=Notification.Type.MENTION,
            reel_id=reel.pk,
            comment_id=getattr(comment, "pk", None),
        )


@transaction.atomic
def publish_reel(user, **fields) -> Reel:
    reel = Reel.objects.create(user=user, **fields)
    mentioned = _mentioned_users(reel.caption, exclude_id=user.pk)
    if mentioned:
        reel.mentions.set(mentioned)
        _notify_mentions(mentioned, sender_id=user.pk, reel=reel)
    return reel


@transaction.atomic
def toggle_like(reel: Reel, user) -> tuple[bool, int]:
    """Like the reel, or take the like back. Returns ``(liked, like_count)``."""

    if reel.likes.filter(pk=user.pk).exists():
        reel.likes.remove(user)
        liked = False
    else:
        reel.likes.add(user)
        liked = True
        notify_user(
            recipient_id=reel.user_id,
            sender_id=user.pk,
            notification_type=Notification.Type.LIKE,
            reel_id=reel.pk,
        )

    reel.like_count = reel.likes.count()
    reel.save(update_fields=["like_count"])
    return liked, reel.like_count


@transaction.atomic
def add_comment(reel: Reel, user, content: str) -> ReelComment:
    if reel.is_comments_disabled:
        msg = "Comments are disabled for this reel"
        raise ValidationError(msg, code="comments_disabled")

    comment = ReelComment.objects.create(reel=reel, user=user, content=content)
    Reel.objects.filter(pk=reel.pk).update(comment_count=F("comment_count") + 1)

    notify_user(
        recipient_id=reel.user_id,
        sender_id=user.pk,
        notification_type=Notification.Type.COMMENT,
        reel_id=reel.pk,
        comment_id=comment.pk,
    )
    _notify_mentions(
        _mentioned_users(content, exclude_id=user.pk),
        sender_id=user.pk,
        reel=reel,
        comment=comment,
    )
    logger.debug("User %s commented on reel %s", user.pk, reel.pk)
    return comment
