from django.contrib import admin

from bookings.models import Attendee, Booking, BookingItem


class BookingItemInline(admin.TabularInline):
    model = BookingItem
    extra = 0


class AttendeeInline(admin.TabularInline):
    model = Attendee
    extra = 0


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["booking_number", "user", "event", "status", "payment_status", "final_amount"]
    list_filter = ["status", "payment_status", "payment_method"]
    search_fields = ["booking_number", "user__email"]
    inlines = [BookingItemInline, AttendeeInline]
