from django.contrib.auth import get_user_model
from rest_framework import serializers

from cookiepedia.messaging.models import MAX_PARTICIPANTS
from cookiepedia.messaging.models import Conversation
from cookiepedia.messaging.models import Message
from cookiepedia.users.api.serializers import UserSummarySerializer

User = get_user_model()


class MessageSerializer(serializers.ModelSerializer):
    sender = UserSummarySerializer(read_only=True)
    type = serializers.CharField(source="kind", read_only=True)
    read_by = serializers.PrimaryKeyRelatedField(many=True, read_only=True)

    class Meta:
        model = Message
        fields = [
            "id",
            "conversation",
            "sender",
            "content",
            "type",
            "media_url",
            "read_by",
            "created_at",
        ]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    content = serializers.CharField()
    type = serializers.ChoiceField(
        choices=Message.Kind.choices,
        default=Message.Kind.TEXT,
        source="kind",
    )


class ConversationSerializer(serializers.ModelSerializer):
    participants = UserSummarySerializer(many=True, read_only=True)
    last_message = MessageSerializer(read_only=True)

    class Meta:
        model = Conversation
        fields = [
            "id",
            "participants",
            "last_message",
            "is_group",
            "group_name",
            "group_photo",
            "group_admin",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ConversationCreateSerializer(serializers.Serializer):
    """Start a conversation with other users.

    One participant opens (or reuses) a direct conversation; more than one, or
    ``is_group``, creates a group administered by the requester.
    """

    participants = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        min_length=1,
        max_length=MAX_PARTICIPANTS - 1,
    )
    is_group = serializers.BooleanField(default=False)
    group_name = serializers.CharField(
        max_length=100,
        required=False,
        allow_blank=True,
        default="",
    )
    group_photo = serializers.CharField(
        max_length=500,
        required=False,
        allow_blank=True,
        default="",
    )

    def validate_participants(self, value):
        request = self.context["request"]
        others = [pk for pk in dict.fromkeys(value) if pk != request.user.pk]
        if not others:
            msg = "Add at least one other participant."
            raise serializers.ValidationError(msg)
        found = set(
            User.objects.filter(pk__in=others, is_active=True).values_list(
                "pk",
                flat=True,
            ),
        )
        missing = [pk for pk in others if pk not in found]
        if missing:
            msg = f"Unknown users: {', '.join(map(str, missing))}"
            raise serializers.ValidationError(msg)
        return others

    def validate(self, attrs):
        if len(attrs["participants"]) > 1:
            attrs["is_group"] = True
        return attrs
