from django.contrib import admin

from cookiepedia.creator_channels import models


@admin.register(models.Channel)
class ChannelAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "owner", "is_verified", "is_active", "privacy"]
    search_fields = ["name", "description", "owner__username"]
    list_filter = ["is_verified", "is_active", "privacy", "created_at"]
    filter_horizontal = ["subscribers"]
