from django.contrib import admin

from payments.models import PaymentOrder


@admin.register(PaymentOrder)
class PaymentOrderAdmin(admin.ModelAdmin):
    list_display = ["gateway_order_id", "user", "event", "amount", "currency", "status", "created_at"]
    list_filter = ["status", "currency"]
    search_fields = ["gateway_order_id", "gateway_payment_id", "user_email"]
