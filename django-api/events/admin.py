from django.contrib import admin

from events.models import Event, TicketType


class TicketTypeInline(admin.TabularInline):
    model = TicketType
    extra = 1
    readonly_fields = ["sold"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "organizer", "category", "status", "start_date", "created_at"]
    list_filter = ["status", "category"]
    search_fields = ["title", "description"]
    inlines = [TicketTypeInline]
