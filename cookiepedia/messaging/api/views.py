from __future__ import annotations

import logging

from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db.models import Prefetch
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound
from rest_framework.exceptions import PermissionDenied
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from cookiepedia.messaging import services
from cookiepedia.messaging.models import Conversation
from cookiepedia.messaging.models import Message
from cookiepedia.users.models import User

from .serializers import ConversationCreateSerializer
from .serializers import ConversationSerializer
from .serializers import MessageCreateSerializer
from .serializers import MessageSerializer

logger = logging.getLogger(__name__)


class ConversationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    GenericViewSet,
):
    """Conversations of the authenticated user, newest activity first.

    Live delivery happens over the websocket relay; ``messages`` (POST) is
    the fallback that only stores the message.
    """

    serializer_class = ConversationSerializer

    def get_queryset(self):
        return (
            Conversation.objects.for_user(self.request.user)
            .select_related("last_message__sender")
            .prefetch_related(
                "participants",
                Prefetch(
                    "last_message__read_by",
                    queryset=User.objects.only("pk"),
                ),
            )
            .order_by("-updated_at", "-id")
        )

    @extend_schema(
        request=ConversationCreateSerializer,
        responses={200: ConversationSerializer, 201: ConversationSerializer},
    )
    def create(self, request, *args, **kwargs):
        serializer = ConversationCreateSerializer(
            data=request.data,
            context={"request": request},
        )
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            if data["is_group"]:
                conversation = Conversation.objects.start(
                    [request.user.pk, *data["participants"]],
                    is_group=True,
                    group_name=data["group_name"],
                    group_photo=data["group_photo"],
                    group_admin=request.user,
                )
                created = True
            else:
                other = User.objects.get(pk=data["participants"][0])
                conversation, created = Conversation.objects.get_or_start_direct(
                    request.user,
                    other,
                )
        except DjangoValidationError as exc:
            raise ValidationError({"participants": exc.messages}) from exc

        out = ConversationSerializer(conversation, context={"request": request}).data
        return Response(
            out,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )

    def perform_destroy(self, instance):
        # Only hides the conversation for the requester.
        services.hide_conversation(instance, self.request.user)

    @extend_schema(responses=MessageSerializer(many=True))
    @action(detail=True, methods=["get"])
    def messages(self, request, pk=None):
        conversation = self._participant_conversation(pk)
        queryset = (
            Message.objects.filter(conversation=conversation)
            .select_related("sender")
            .prefetch_related(Prefetch("read_by", queryset=User.objects.only("pk")))
            .order_by("created_at", "id")
        )
        page = self.paginate_queryset(queryset)
        serializer = MessageSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(request=MessageCreateSerializer, responses={201: MessageSerializer})
    @messages.mapping.post
    def send_message(self, request, pk=None):
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        conversation = Conversation.objects.filter(pk=pk).first()
        if conversation is None:
            msg = "Conversation not found."
            raise NotFound(msg)
        if not conversation.has_participant(request.user.pk):
            if settings.REALTIME_ENFORCE_PARTICIPANTS:
                msg = "You are not a participant of this conversation."
                raise PermissionDenied(msg)
            try:
                services.add_participant(conversation, request.user)
            except DjangoValidationError as exc:
                raise ValidationError({"detail": exc.messages}) from exc

        message = services.store_message(
            conversation_id=conversation.pk,
            sender_id=request.user.pk,
            content=serializer.validated_data["content"],
            kind=serializer.validated_data["kind"],
        )
        logger.debug("Stored message %s without live delivery", message.pk)
        return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)

    def _participant_conversation(self, pk) -> Conversation:
        conversation = Conversation.objects.filter(
            pk=pk,
            participants=self.request.user,
        ).first()
        if conversation is None:
            msg = "Conversation not found."
            raise NotFound(msg)
        return conversation
