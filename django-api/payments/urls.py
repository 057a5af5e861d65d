from django.urls import path

from payments.handlers import CreateOrderView, VerifyPaymentView

urlpatterns = [
    path("payments/create-order", CreateOrderView.as_view(), name="payment-create-order"),
    path("payments/verify-payment", VerifyPaymentView.as_view(), name="payment-verify"),
]
