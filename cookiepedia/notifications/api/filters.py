import django_filters

from cookiepedia.notifications.models import Notification


class NotificationFilter(django_filters.FilterSet):
    type = django_filters.ChoiceFilter(
        field_name="notification_type",
        choices=Notification.Type.choices,
    )

    class Meta:
        model = Notification
        fields = ["type", "is_read"]
