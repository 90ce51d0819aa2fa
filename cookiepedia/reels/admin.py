from django.contrib import admin

from cookiepedia.reels import models


class ReelCommentInline(admin.TabularInline):
    model = models.ReelComment
    extra = 0
    raw_id_fields = ["user"]


@admin.register(models.Reel)
class ReelAdmin(admin.ModelAdmin):
    list_display = ["id", "user", "privacy", "like_count", "comment_count", "is_published"]
    search_fields = ["caption", "user__username"]
    list_filter = ["privacy", "is_published", "is_archived", "created_at"]
    raw_id_fields = ["user"]
    readonly_fields = ["hashtags", "like_count", "comment_count"]
    inlines = [ReelCommentInline]
