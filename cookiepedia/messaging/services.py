"""Persistence steps shared by the realtime relay and the REST fallback."""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from .models import MAX_PARTICIPANTS
from .models import Conversation
from .models import ConversationDeletion
from .models import Message
from .models import MessageReceipt

logger = logging.getLogger(__name__)


def is_participant(conversation_id: int, user_id: int) -> bool:
    return Conversation.objects.filter(
        pk=conversation_id,
        participants__pk=user_id,
    ).exists()


def add_participant(conversation: Conversation, user) -> None:
    """Join ``user`` to the conversation.

    A full conversation raises ``ValidationError`` before anything is written,
    so the caller's transaction stays usable.
    """

    if conversation.has_participant(user.pk):
        return
    if conversation.participants.count() >= MAX_PARTICIPANTS:
        msg = f"A conversation cannot have more than {MAX_PARTICIPANTS} participants"
        raise ValidationError(msg, code="participants")
    conversation.participants.add(user)


def store_message(
    *,
    conversation_id: int,
    sender_id: int,
    content: str,
    kind: str = Message.Kind.TEXT,
) -> Message:
    """Persist a message and move the conversation's last-message pointer.

    The message row and its sender receipt are written together; the pointer
    update is a second, independent write. Raises ``Conversation.DoesNotExist``
    for an unknown conversation.
    """

    conversation = Conversation.objects.get(pk=conversation_id)
    with transaction.atomic():
        message = Message.objects.create(
            conversation=conversation,
            sender_id=sender_id,
            content=content,
            kind=kind,
        )
        MessageReceipt.objects.create(message=message, user_id=sender_id)

    touch_conversation(conversation.pk, message)
    return message


def touch_conversation(conversation_id: int, message: Message) -> None:
    # ``update`` bypasses auto_now, so the activity timestamp is set explicitly.
    Conversation.objects.filter(pk=conversation_id).update(
        last_message=message,
        updated_at=timezone.now(),
    )


def add_reader(message_id: int, reader_id: int) -> Message | None:
    """Record ``reader_id`` in the read-by set. Returns None for unknown messages."""

    message = Message.objects.filter(pk=message_id).first()
    if message is None:
        return None
    _, created = MessageReceipt.objects.get_or_create(
        message=message,
        user_id=reader_id,
    )
    if not created:
        logger.debug("Message %s already read by %s", message_id, reader_id)
    return message


def hide_conversation(conversation: Conversation, user) -> None:
    ConversationDeletion.objects.get_or_create(conversation=conversation, user=user)


def message_payload(message: Message, read_by: list[int] | None = None) -> dict:
    """Wire representation of a message inside realtime envelopes."""

    if read_by is None:
        read_by = message.read_by_ids()
    return {
        "id": message.pk,
        "conversationId": message.conversation_id,
        "sender": message.sender_id,
        "content": message.content,
        "type": message.kind,
        "mediaUrl": message.media_url,
        "readBy": read_by,
        "createdAt": message.created_at.isoformat(),
    }
