from django.contrib import admin

from cookiepedia.messaging import models


class MessageReceiptInline(admin.TabularInline):
    model = models.MessageReceipt
    extra = 0
    readonly_fields = ["user", "read_at"]


@admin.register(models.Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ["id", "is_group", "group_name", "last_message", "updated_at"]
    search_fields = ["group_name", "participants__username"]
    list_filter = ["is_group", "created_at"]
    filter_horizontal = ["participants"]
    raw_id_fields = ["last_message", "group_admin"]


@admin.register(models.Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ["id", "conversation", "sender", "kind", "created_at"]
    search_fields = ["content", "sender__username"]
    list_filter = ["kind", "created_at"]
    raw_id_fields = ["conversation", "sender"]
    inlines = [MessageReceiptInline]
