from django.contrib import admin

from cookiepedia.notifications import models


@admin.register(models.Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ["id", "recipient", "sender", "notification_type", "is_read"]
    search_fields = ["recipient__username", "sender__username", "notification_type"]
    list_filter = ["notification_type", "is_read", "created_at"]
    raw_id_fields = ["recipient", "sender", "message", "conversation", "reel", "comment"]
