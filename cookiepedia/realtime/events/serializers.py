"""Validation of client to relay events."""

from rest_framework import serializers

from cookiepedia.messaging.models import Message

from .envelopes import EventKind


class InboundEventSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(
        choices=[EventKind.MESSAGE, EventKind.MESSAGE_READ, EventKind.TYPING],
    )


class MessageEventSerializer(serializers.Serializer):
    conversationId = serializers.IntegerField(  # noqa: N815
        min_value=1,
        source="conversation_id",
    )
    recipientId = serializers.IntegerField(min_value=1, source="recipient_id")  # noqa: N815
    content = serializers.CharField()
    type = serializers.ChoiceField(
        choices=Message.Kind.choices,
        default=Message.Kind.TEXT,
        source="kind",
    )


class MessageReadEventSerializer(serializers.Serializer):
    messageId = serializers.IntegerField(min_value=1, source="message_id")  # noqa: N815
    conversationId = serializers.IntegerField(  # noqa: N815
        min_value=1,
        source="conversation_id",
    )


class TypingEventSerializer(serializers.Serializer):
    conversationId = serializers.IntegerField(  # noqa: N815
        min_value=1,
        source="conversation_id",
    )
    recipientId = serializers.IntegerField(min_value=1, source="recipient_id")  # noqa: N815
