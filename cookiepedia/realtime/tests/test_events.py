from datetime import datetime

import pytest

from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import create_notification
from cookiepedia.realtime.events.envelopes import EventKind
from cookiepedia.realtime.events.envelopes import UserStatus
from cookiepedia.realtime.events.envelopes import envelope
from cookiepedia.realtime.events.envelopes import status_event
from cookiepedia.realtime.events.notifications import publish_notification_created
from cookiepedia.realtime.events.serializers import MessageEventSerializer
from cookiepedia.realtime.hub import RealtimeHub

from .fakes import FakeConnection


def test_envelope_shape():
    event = envelope(EventKind.TYPING, senderId=1, isTyping=True)
    assert list(event) == ["kind", "senderId", "isTyping", "timestamp"]
    assert event["kind"] == "TYPING"
    datetime.fromisoformat(event["timestamp"])


def test_status_event():
    event = status_event(7, UserStatus.OFFLINE)
    assert event["kind"] == "USER_STATUS"
    assert event["userId"] == 7
    assert event["status"] == "offline"


def test_message_event_serializer_maps_camel_case():
    serializer = MessageEventSerializer(
        data={"conversationId": 3, "recipientId": 4, "content": "hi"},
    )
    assert serializer.is_valid(), serializer.errors
    assert serializer.validated_data == {
        "conversation_id": 3,
        "recipient_id": 4,
        "content": "hi",
        "kind": "text",
    }


def test_message_event_serializer_accepts_long_content():
    serializer = MessageEventSerializer(
        data={"conversationId": 3, "recipientId": 4, "content": "x" * 20000},
    )
    assert serializer.is_valid(), serializer.errors
    assert len(serializer.validated_data["content"]) == 20000


@pytest.mark.parametrize("content", ["", "   "])
def test_message_event_serializer_rejects_blank_content(content):
    serializer = MessageEventSerializer(
        data={"conversationId": 3, "recipientId": 4, "content": content},
    )
    assert not serializer.is_valid()
    assert "content" in serializer.errors


@pytest.mark.django_db
def test_publish_notification_reaches_connected_recipient(user, other_user):
    hub = RealtimeHub(sweep_interval=60, enforce_participants=False)
    conn = FakeConnection()
    hub.connect(other_user.pk, conn)
    notification = create_notification(
        recipient_id=other_user.pk,
        sender_id=user.pk,
        notification_type=Notification.Type.FOLLOW,
    )

    assert publish_notification_created(notification, hub=hub) is True
    [event] = conn.sent
    assert event["kind"] == "NOTIFICATION"
    assert event["notification"]["id"] == notification.pk
    assert event["notification"]["type"] == "follow"
    assert event["notification"]["sender"] == user.pk
    assert event["notification"]["isRead"] is False


@pytest.mark.django_db
def test_publish_notification_to_offline_user(user, other_user):
    hub = RealtimeHub(sweep_interval=60, enforce_participants=False)
    notification = create_notification(
        recipient_id=other_user.pk,
        sender_id=user.pk,
        notification_type=Notification.Type.FOLLOW,
    )
    assert publish_notification_created(notification, hub=hub) is False
