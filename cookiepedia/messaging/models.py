from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db import transaction
from django.db.models import Count
from django.utils.translation import gettext_lazy as _

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Iterable

MIN_PARTICIPANTS = 2
MAX_PARTICIPANTS = 10


def normalize_participant_ids(participant_ids: Iterable[int | str]) -> list[int]:
    """Deduplicate participant ids (order preserved) and check the group size."""

    unique = list(dict.fromkeys(int(pid) for pid in participant_ids))
    if not MIN_PARTICIPANTS <= len(unique) <= MAX_PARTICIPANTS:
        msg = _("A conversation must have between 2 and 10 participants")
        raise ValidationError(msg, code="participants")
    return unique


class ConversationQuerySet(models.QuerySet):
    def for_user(self, user):
        """Conversations the user takes part in and has not deleted."""
        return self.filter(participants=user).exclude(deletions__user=user)

    def direct_between(self, user, other):
        """Non-group conversations whose participants are exactly the two users."""
        shared = self.filter(participants=user).filter(participants=other)
        # Counted apart from the membership joins, which only see matching rows.
        return (
            self.filter(is_group=False, pk__in=shared.values("pk"))
            .annotate(participant_count=Count("participants", distinct=True))
            .filter(participant_count=MIN_PARTICIPANTS)
        )


class ConversationManager(models.Manager.from_queryset(ConversationQuerySet)):
    def start(
        self,
        participant_ids: Iterable[int | str],
        *,
        is_group: bool = False,
        group_name: str = "",
        group_photo: str = "",
        group_admin=None,
    ) -> Conversation:
        ids = normalize_participant_ids(participant_ids)
        with transaction.atomic():
            conversation = self.create(
                is_group=is_group,
                group_name=group_name,
                group_photo=group_photo,
                group_admin=group_admin,
            )
            conversation.participants.add(*ids)
        return conversation

    def get_or_start_direct(self, user, other) -> tuple[Conversation, bool]:
        existing = self.direct_between(user, other).first()
        if existing is not None:
            return existing, False
        return self.start([user.pk, other.pk]), True


class Conversation(models.Model):
    participants = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        related_name="conversations",
    )
    last_message = models.ForeignKey(
        "messaging.Message",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="+",
    )
    is_group = models.BooleanField(default=False)
    group_name = models.CharField(max_length=100, blank=True, default="")
    group_photo = models.CharField(max_length=500, blank=True, default="")
    group_admin = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="administered_conversations",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ConversationManager()

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self) -> str:
        if self.is_group and self.group_name:
            return self.group_name
        return f"Conversation {self.pk}"

    def has_participant(self, user_id: int) -> bool:
        return self.participants.filter(pk=user_id).exists()


class ConversationDeletion(models.Model):
    """Soft-delete marker: the conversation is hidden for ``user`` only."""

    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="deletions",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    deleted_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["conversation", "user"],
                name="unique_conversation_deletion",
            ),
        ]


class Message(models.Model):
    class Kind(models.TextChoices):
        TEXT = "text", _("Text")
        IMAGE = "image", _("Image")
        VIDEO = "video", _("Video")
        AUDIO = "audio", _("Audio")

    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="messages",
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    content = models.TextField()
    kind = models.CharField(max_length=10, choices=Kind.choices, default=Kind.TEXT)
    read_by = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through="messaging.MessageReceipt",
        related_name="read_messages",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(
                fields=["conversation", "created_at"],
                name="message_conversation_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"Message {self.pk} in {self.conversation_id}"

    @property
    def media_url(self) -> str | None:
        if self.kind == self.Kind.TEXT:
            return None
        extension = "jpg" if self.kind == self.Kind.IMAGE else self.kind
        return f"/uploads/messages/{self.pk}.{extension}"

    def read_by_ids(self) -> list[int]:
        """Reader ids in the order they acknowledged; the sender comes first."""
        return list(
            self.receipts.order_by("read_at", "id").values_list("user_id", flat=True)
        )


class MessageReceipt(models.Model):
    message = models.ForeignKey(
        Message,
        on_delete=models.CASCADE,
        related_name="receipts",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="+",
    )
    read_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["message", "user"],
                name="unique_message_receipt",
            ),
        ]
