from unittest import mock

import pytest

from cookiepedia.notifications.models import Notification
from cookiepedia.notifications.services import create_notification
from cookiepedia.notifications.services import notify_user

pytestmark = pytest.mark.django_db


def test_create_notification_allows_repeats(user, other_user):
    for _ in range(2):
        create_notification(
            recipient_id=other_user.pk,
            sender_id=user.pk,
            notification_type=Notification.Type.LIKE,
        )
    assert Notification.objects.filter(recipient=other_user).count() == 2


def test_notify_user_skips_self(user):
    assert (
        notify_user(
            recipient_id=user.pk,
            sender_id=user.pk,
            notification_type=Notification.Type.LIKE,
        )
        is None
    )
    assert not Notification.objects.exists()


def test_notify_user_publishes_after_commit(
    user,
    other_user,
    django_capture_on_commit_callbacks,
):
    with (
        mock.patch(
            "cookiepedia.notifications.services.publish_notification_created",
        ) as publish,
        django_capture_on_commit_callbacks(execute=True),
    ):
        notification = notify_user(
            recipient_id=other_user.pk,
            sender_id=user.pk,
            notification_type=Notification.Type.FOLLOW,
        )
        publish.assert_not_called()

    publish.assert_called_once_with(notification)
    assert notification.is_read is False


def test_notify_user_does_not_publish_on_rollback(user, other_user):
    with mock.patch(
        "cookiepedia.notifications.services.publish_notification_created",
    ) as publish:
        notify_user(
            recipient_id=other_user.pk,
            sender_id=user.pk,
            notification_type=Notification.Type.FOLLOW,
        )
    # The test transaction never commits.
    publish.assert_not_called()
