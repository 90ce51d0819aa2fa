from rest_framework import serializers

from cookiepedia.reels.models import Reel
from cookiepedia.reels.models import ReelComment
from cookiepedia.users.api.serializers import UserSummarySerializer


class ReelSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)
    is_liked = serializers.SerializerMethodField()

    class Meta:
        model = Reel
        fields = [
            "id",
            "user",
            "video_url",
            "thumbnail_url",
            "caption",
            "music",
            "duration",
            "aspect_ratio",
            "hashtags",
            "like_count",
            "comment_count",
            "share_count",
            "views",
            "is_liked",
            "is_comments_disabled",
            "privacy",
            "created_at",
        ]
        read_only_fields = [
            "hashtags",
            "like_count",
            "comment_count",
            "share_count",
            "views",
            "created_at",
        ]

    def get_is_liked(self, obj: Reel) -> bool:
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if not getattr(user, "is_authenticated", False):
            return False
        return obj.likes.filter(pk=user.pk).exists()


class ReelCommentSerializer(serializers.ModelSerializer):
    user = UserSummarySerializer(read_only=True)

    class Meta:
        model = ReelComment
        fields = ["id", "reel", "user", "content", "created_at"]
        read_only_fields = ["id", "reel", "user", "created_at"]
