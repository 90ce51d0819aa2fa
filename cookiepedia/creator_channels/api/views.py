from django.core.exceptions import ValidationError as DjangoValidationError
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from cookiepedia.creator_channels.models import Channel
from cookiepedia.creator_channels.services import create_channel

from .serializers import ChannelCreateSerializer
from .serializers import ChannelSerializer


class ChannelViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    GenericViewSet,
):
    """Creator channels. ``?owner=<user id>`` finds a user's channel."""

    serializer_class = ChannelSerializer
    queryset = Channel.objects.filter(is_active=True).select_related("owner")
    filterset_fields = ["owner", "is_verified"]

    @extend_schema(request=ChannelCreateSerializer, responses={201: ChannelSerializer})
    def create(self, request, *args, **kwargs):
        serializer = ChannelCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            channel = create_channel(request.user, **serializer.validated_data)
        except DjangoValidationError as exc:
            raise ValidationError({"detail": exc.messages}) from exc
        out = ChannelSerializer(channel, context={"request": request}).data
        return Response(out, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get", "patch"])
    def mine(self, request):
        channel = Channel.objects.filter(owner=request.user).first()
        if channel is None:
            msg = "You do not have a channel yet."
            raise NotFound(msg)
        if request.method == "PATCH":
            serializer = ChannelSerializer(
                channel,
                data=request.data,
                partial=True,
                context={"request": request},
            )
            serializer.is_valid(raise_exception=True)
            serializer.save()
            return Response(serializer.data)
        return Response(ChannelSerializer(channel, context={"request": request}).data)
