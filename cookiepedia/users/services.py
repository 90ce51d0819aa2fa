"""Follow graph changes.

Following a creator also subscribes the follower to the creator's channel, so
the channel subscriber set mirrors the ``followers`` relation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError
from django.db import transaction

from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import notify_user

if TYPE_CHECKING:  # import for type checking only
    from .models import User

logger = logging.getLogger(__name__)


def _channel_of(user: User):
    try:
        return user.channel
    except ObjectDoesNotExist:
        return None


@transaction.atomic
def follow_user(follower: User, target: User) -> None:
    if follower.pk == target.pk:
        msg = "You cannot follow yourself"
        raise ValidationError(msg, code="self_follow")
    if follower.is_following(target):
        msg = "You are already following this user"
        raise ValidationError(msg, code="already_following")

    follower.following.add(target)
    channel = _channel_of(target)
    if channel is not None:
        channel.subscribers.add(follower)

    notify_user(
        recipient_id=target.pk,
        sender_id=follower.pk,
        notification_type=Notification.Type.FOLLOW,
    )
    logger.info("User %s followed %s", follower.pk, target.pk)


@transaction.atomic
def unfollow_user(follower: User, target: User) -> None:
    if not follower.is_following(target):
        msg = "You are not following this user"
        raise ValidationError(msg, code="not_following")

    follower.following.remove(target)
    channel = _channel_of(target)
    if channel is not None:
        channel.subscribers.remove(follower)
    logger.info("User %s unfollowed %s", follower.pk, target.pk)
