from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema
from drf_spectacular.utils import inline_serializer
from rest_framework import mixins
from rest_framework import serializers
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from cookiepedia.reels import services
from cookiepedia.reels.models import Reel

from .serializers import ReelCommentSerializer
from .serializers import ReelSerializer


class ReelViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    GenericViewSet,
):
    """Short recipe videos. ``list`` is the newest-first feed.

    Media is uploaded elsewhere; clients send the resulting URLs.
    """

    serializer_class = ReelSerializer

    def get_queryset(self):
        return Reel.objects.visible_to(self.request.user).select_related("user")

    def perform_create(self, serializer):
        serializer.instance = services.publish_reel(
            self.request.user,
            **serializer.validated_data,
        )

    def perform_destroy(self, instance):
        if instance.user_id != self.request.user.pk:
            msg = "Only the owner can delete this reel."
            raise PermissionDenied(msg)
        instance.delete()

    @action(detail=False)
    def following(self, request):
        followed = request.user.following.values_list("pk", flat=True)
        queryset = self.get_queryset().filter(user__in=[*followed, request.user.pk])
        page = self.paginate_queryset(queryset)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(
        request=None,
        responses=inline_serializer(
            "ReelLike",
            fields={
                "liked": serializers.BooleanField(),
                "like_count": serializers.IntegerField(),
            },
        ),
    )
    @action(detail=True, methods=["post"])
    def like(self, request, pk=None):
        reel = self.get_object()
        liked, like_count = services.toggle_like(reel, request.user)
        return Response({"liked": liked, "like_count": like_count})

    @extend_schema(responses=ReelCommentSerializer(many=True))
    @action(detail=True, methods=["get"])
    def comments(self, request, pk=None):
        reel = self.get_object()
        queryset = reel.comments.select_related("user")
        page = self.paginate_queryset(queryset)
        serializer = ReelCommentSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(request=ReelCommentSerializer, responses={201: ReelCommentSerializer})
    @comments.mapping.post
    def add_comment(self, request, pk=None):
        reel = self.get_object()
        serializer = ReelCommentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            comment = services.add_comment(
                reel,
                request.user,
                serializer.validated_data["content"],
            )
        except DjangoValidationError as exc:
            raise ValidationError({"detail": exc.messages}) from exc
        return Response(
            ReelCommentSerializer(comment).data,
            status=status.HTTP_201_CREATED,
        )
