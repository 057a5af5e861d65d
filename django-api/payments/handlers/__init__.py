from payments.handlers.views import CreateOrderView, VerifyPaymentView

__all__ = ["CreateOrderView", "VerifyPaymentView"]
