from django.core.exceptions import ValidationError
from django.db.models.signals import m2m_changed
from django.dispatch import receiver

from .models import MAX_PARTICIPANTS
from .models import MIN_PARTICIPANTS
from .models import Conversation


def _too_many():
    return ValidationError(
        f"A conversation cannot have more than {MAX_PARTICIPANTS} participants",
        code="participants",
    )


def _too_few():
    return ValidationError(
        f"A conversation needs at least {MIN_PARTICIPANTS} participants",
        code="participants",
    )


@receiver(m2m_changed, sender=Conversation.participants.through)
def guard_participant_count(sender, instance, action, reverse, pk_set, **kwargs):
    """Keep every conversation between MIN and MAX distinct participants.

    The manager validates new conversations up front; this guard covers later
    writes through either side of the relation.
    """

    if action not in {"pre_add", "pre_remove"} or not pk_set:
        return

    if not reverse:
        current = set(instance.participants.values_list("pk", flat=True))
        if action == "pre_add" and len(current | pk_set) > MAX_PARTICIPANTS:
            raise _too_many()
        # A freshly created conversation has no rows yet, only check shrinking.
        if action == "pre_remove" and current and len(current - pk_set) < MIN_PARTICIPANTS:
            raise _too_few()
        return

    # ``user.conversations.add(...)``: instance is the user, pk_set holds
    # conversation ids.
    for conversation in Conversation.objects.filter(pk__in=pk_set):
        current = set(conversation.participants.values_list("pk", flat=True))
        if action == "pre_add" and len(current | {instance.pk}) > MAX_PARTICIPANTS:
            raise _too_many()
        if action == "pre_remove" and len(current - {instance.pk}) < MIN_PARTICIPANTS:
            raise _too_few()
