from __future__ import annotations

from rest_framework import serializers

from cookiepedia.notifications.models import Notification
from cookiepedia.users.api.serializers import UserSummarySerializer


class NotificationSerializer(serializers.ModelSerializer):
    """Read serializer for notifications."""

    sender = UserSummarySerializer(read_only=True)
    type = serializers.CharField(source="notification_type", read_only=True)

    class Meta:
        model = Notification
        fields = (
            "id",
            "recipient",
            "sender",
            "type",
            "message",
            "conversation",
            "reel",
            "comment",
            "is_read",
            "created_at",
        )
        read_only_fields = fields
