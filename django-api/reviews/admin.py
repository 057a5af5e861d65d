from django.contrib import admin

from reviews.models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "rating", "moderation_status", "report_count", "created_at"]
    list_filter = ["moderation_status", "rating", "is_public"]
    search_fields = ["title", "comment", "user__email"]
