from django.contrib.auth import password_validation
from django.core.exceptions import ObjectDoesNotExist
from rest_framework import serializers

from cookiepedia.users.models import SOCIAL_PLATFORMS
from cookiepedia.users.models import User


class UserSummarySerializer(serializers.ModelSerializer[User]):
    class Meta:
        model = User
        fields = ["id", "username", "name", "profile_picture", "is_verified"]
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer[User]):
    id = serializers.IntegerField(read_only=True)
    # Username & email are fixed at signup.
    username = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    followers_count = serializers.IntegerField(read_only=True)
    following_count = serializers.IntegerField(read_only=True)
    channel = serializers.SerializerMethodField()
    is_following = serializers.SerializerMethodField()
    url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "name",
            "email",
            "bio",
            "website",
            "profile_picture",
            "cover_photo",
            "is_verified",
            "role",
            "social_links",
            "profile_viewable",
            "show_online_status",
            "followers_count",
            "following_count",
            "channel",
            "is_following",
            "last_active",
            "created_at",
            "url",
        ]
        read_only_fields = [
            "is_verified",
            "role",
            "last_active",
            "created_at",
        ]

    def get_channel(self, obj: User) -> int | None:
        try:
            return obj.channel.pk
        except ObjectDoesNotExist:
            return None

    def get_is_following(self, obj: User) -> bool:
        request = self.context.get("request")
        viewer = getattr(request, "user", None)
        if not getattr(viewer, "is_authenticated", False) or viewer.pk == obj.pk:
            return False
        return viewer.is_following(obj)

    def get_url(self, obj: User) -> str:
        url = obj.get_absolute_url()
        request = self.context.get("request")
        return request.build_absolute_uri(url) if request is not None else url

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get("request")
        if getattr(getattr(request, "user", None), "pk", None) != instance.pk:
            data.pop("email", None)
        return data


class UserUpdateSerializer(serializers.ModelSerializer[User]):
    class Meta:
        model = User
        fields = [
            "name",
            "bio",
            "website",
            "profile_picture",
            "cover_photo",
            "social_links",
            "profile_viewable",
            "show_online_status",
            "notification_settings",
        ]

    def validate(self, attrs):
        forbidden = {k for k in ("username", "email") if k in self.initial_data}
        if forbidden:
            raise serializers.ValidationError(
                {f: "This field cannot be changed." for f in sorted(forbidden)},
            )
        return attrs

    def validate_social_links(self, value):
        if not isinstance(value, dict):
            msg = "Expected an object of platform to URL."
            raise serializers.ValidationError(msg)
        unknown = sorted(set(value) - set(SOCIAL_PLATFORMS))
        if unknown:
            msg = f"Unsupported platforms: {', '.join(unknown)}"
            raise serializers.ValidationError(msg)
        return value

    def validate_notification_settings(self, value):
        if not isinstance(value, dict) or not all(
            isinstance(v, bool) for v in value.values()
        ):
            msg = "Expected an object of boolean flags."
            raise serializers.ValidationError(msg)
        current = dict(getattr(self.instance, "notification_settings", {}) or {})
        current.update(value)
        return current


class RegisterSerializer(serializers.ModelSerializer[User]):
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    class Meta:
        model = User
        fields = ["username", "email", "name", "password"]

    def validate_email(self, value: str) -> str:
        value = value.lower()
        if User.objects.filter(email__iexact=value).exists():
            msg = "A user with that email already exists."
            raise serializers.ValidationError(msg)
        return value

    def validate(self, attrs):
        candidate = User(username=attrs["username"], email=attrs["email"])
        password_validation.validate_password(attrs["password"], candidate)
        return attrs

    def create(self, validated_data):
        return User.objects.create_user(**validated_data)
