import pytest
from django.core.exceptions import ValidationError
from django.db import transaction

from cookiepedia.messaging import services
from cookiepedia.messaging.models import Conversation
from cookiepedia.messaging.models import Message
from cookiepedia.messaging.models import normalize_participant_ids

pytestmark = pytest.mark.django_db


def test_normalize_participant_ids_deduplicates():
    assert normalize_participant_ids([3, "1", 3, 2]) == [3, 1, 2]


@pytest.mark.parametrize("ids", [[1], [1, 1], list(range(1, 12))])
def test_normalize_participant_ids_bounds(ids):
    with pytest.raises(ValidationError):
        normalize_participant_ids(ids)


def test_start_direct_conversation(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    assert set(conversation.participants.values_list("pk", flat=True)) == {
        user.pk,
        other_user.pk,
    }
    assert conversation.is_group is False
    assert conversation.last_message is None


def test_get_or_start_direct_reuses_existing(user, other_user):
    first, created = Conversation.objects.get_or_start_direct(user, other_user)
    assert created is True
    again, created = Conversation.objects.get_or_start_direct(other_user, user)
    assert created is False
    assert again == first


def test_group_does_not_count_as_direct(user, other_user, make_user):
    third = make_user("third")
    Conversation.objects.start([user.pk, other_user.pk, third.pk], is_group=True)
    _, created = Conversation.objects.get_or_start_direct(user, other_user)
    assert created is True


def test_direct_between_finds_the_pair_only(user, other_user, make_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    Conversation.objects.start([user.pk, make_user("third").pk])

    assert list(Conversation.objects.direct_between(user, other_user)) == [
        conversation,
    ]
    assert list(Conversation.objects.direct_between(other_user, user)) == [
        conversation,
    ]


def test_direct_with_a_third_member_is_not_reused(user, other_user, make_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    services.add_participant(conversation, make_user("third"))

    again, created = Conversation.objects.get_or_start_direct(user, other_user)
    assert created is True
    assert again != conversation


def test_add_participant_refuses_a_full_conversation(make_user):
    users = [make_user(f"member{i}") for i in range(10)]
    conversation = Conversation.objects.start([u.pk for u in users], is_group=True)
    with pytest.raises(ValidationError):
        services.add_participant(conversation, make_user("extra"))
    # Nothing was written, so the transaction is still usable.
    assert conversation.participants.count() == 10


def test_add_participant_is_a_noop_for_members(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    services.add_participant(conversation, user)
    assert conversation.participants.count() == 2


def test_participant_limit_is_enforced_on_add(make_user):
    users = [make_user(f"member{i}") for i in range(10)]
    conversation = Conversation.objects.start([u.pk for u in users], is_group=True)
    extra = make_user("extra")
    with pytest.raises(ValidationError), transaction.atomic():
        conversation.participants.add(extra)
    assert conversation.participants.count() == 10


def test_cannot_drop_below_two_participants(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    with pytest.raises(ValidationError), transaction.atomic():
        conversation.participants.remove(other_user)
    assert conversation.participants.count() == 2


def test_store_message_updates_pointer_and_receipt(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    message = services.store_message(
        conversation_id=conversation.pk,
        sender_id=user.pk,
        content="Fresh out of the oven",
    )
    conversation.refresh_from_db()
    assert conversation.last_message == message
    assert message.read_by_ids() == [user.pk]
    assert message.media_url is None


def test_store_message_unknown_conversation(user):
    with pytest.raises(Conversation.DoesNotExist):
        services.store_message(conversation_id=999, sender_id=user.pk, content="hi")
    assert not Message.objects.exists()


def test_add_reader_is_idempotent(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    message = services.store_message(
        conversation_id=conversation.pk,
        sender_id=user.pk,
        content="Taste this",
    )
    services.add_reader(message.pk, other_user.pk)
    services.add_reader(message.pk, other_user.pk)
    assert message.read_by_ids() == [user.pk, other_user.pk]


def test_add_reader_unknown_message(user):
    assert services.add_reader(12345, user.pk) is None


def test_message_payload_wire_format(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    message = services.store_message(
        conversation_id=conversation.pk,
        sender_id=user.pk,
        content="pic",
        kind=Message.Kind.IMAGE,
    )
    payload = services.message_payload(message)
    assert payload["conversationId"] == conversation.pk
    assert payload["sender"] == user.pk
    assert payload["type"] == "image"
    assert payload["mediaUrl"] == f"/uploads/messages/{message.pk}.jpg"
    assert payload["readBy"] == [user.pk]


def test_hidden_conversation_excluded_for_that_user_only(user, other_user):
    conversation = Conversation.objects.start([user.pk, other_user.pk])
    services.hide_conversation(conversation, user)
    services.hide_conversation(conversation, user)

    assert not Conversation.objects.for_user(user).exists()
    assert list(Conversation.objects.for_user(other_user)) == [conversation]
