import pytest
from rest_framework import status

from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import create_notification

pytestmark = pytest.mark.django_db


@pytest.fixture
def inbox(user, other_user):
    like = create_notification(
        recipient_id=user.pk,
        sender_id=other_user.pk,
        notification_type=Notification.Type.LIKE,
    )
    follow = create_notification(
        recipient_id=user.pk,
        sender_id=other_user.pk,
        notification_type=Notification.Type.FOLLOW,
    )
    # Someone else's notification never shows up.
    create_notification(
        recipient_id=other_user.pk,
        sender_id=user.pk,
        notification_type=Notification.Type.FOLLOW,
    )
    return like, follow


def test_list_newest_first_with_unread_count(api_client, inbox, other_user):
    like, follow = inbox
    r = api_client.get("/api/v1/notifications/")
    assert r.status_code == status.HTTP_200_OK
    assert [n["id"] for n in r.data["results"]] == [follow.pk, like.pk]
    assert r.data["unread_count"] == 2
    assert r.data["results"][0]["sender"]["username"] == other_user.username
    assert r.data["results"][0]["type"] == "follow"


def test_filter_by_type(api_client, inbox):
    like, _ = inbox
    r = api_client.get("/api/v1/notifications/", {"type": "like"})
    assert [n["id"] for n in r.data["results"]] == [like.pk]


def test_mark_read_and_unread_count(api_client, inbox):
    like, _ = inbox
    r = api_client.post(f"/api/v1/notifications/{like.pk}/mark-read/")
    assert r.status_code == status.HTTP_204_NO_CONTENT
    like.refresh_from_db()
    assert like.is_read is True

    r = api_client.get("/api/v1/notifications/unread-count/")
    assert r.data == {"unread_count": 1}

    r = api_client.get("/api/v1/notifications/", {"is_read": "false"})
    assert len(r.data["results"]) == 1


def test_mark_all_read(api_client, inbox, user, other_user):
    r = api_client.post("/api/v1/notifications/mark-all-read/")
    assert r.status_code == status.HTTP_204_NO_CONTENT
    assert not Notification.objects.filter(recipient=user, is_read=False).exists()
    assert Notification.objects.filter(recipient=other_user, is_read=False).exists()


def test_delete_own_notification(api_client, inbox):
    like, _ = inbox
    r = api_client.delete(f"/api/v1/notifications/{like.pk}/")
    assert r.status_code == status.HTTP_204_NO_CONTENT
    assert not Notification.objects.filter(pk=like.pk).exists()


def test_cannot_touch_others_notifications(api_client, user, other_user):
    foreign = create_notification(
        recipient_id=other_user.pk,
        sender_id=user.pk,
        notification_type=Notification.Type.LIKE,
    )
    r = api_client.post(f"/api/v1/notifications/{foreign.pk}/mark-read/")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    r = api_client.delete(f"/api/v1/notifications/{foreign.pk}/")
    assert r.status_code == status.HTTP_404_NOT_FOUND
