from rest_framework import serializers

from cookiepedia.creator_channels.models import Channel
from cookiepedia.users.api.serializers import UserSummarySerializer
from cookiepedia.users.models import SOCIAL_PLATFORMS


class ChannelSerializer(serializers.ModelSerializer):
    owner = UserSummarySerializer(read_only=True)
    subscription_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Channel
        fields = [
            "id",
            "owner",
            "name",
            "description",
            "avatar",
            "cover_photo",
            "is_verified",
            "is_active",
            "subscription_count",
            "content_count",
            "social_links",
            "privacy",
            "comment_moderation",
            "created_at",
            "updated_at",
        ]
        read_only_fields = [
            "is_verified",
            "is_active",
            "content_count",
            "created_at",
            "updated_at",
        ]

    def validate_social_links(self, value):
        if not isinstance(value, dict):
            msg = "Expected an object of platform to URL."
            raise serializers.ValidationError(msg)
        unknown = sorted(set(value) - set(SOCIAL_PLATFORMS))
        if unknown:
            msg = f"Unsupported platforms: {', '.join(unknown)}"
            raise serializers.ValidationError(msg)
        return value


class ChannelCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=50, required=False, allow_blank=True)
    description = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        default="",
    )
