from payments.domain.models import OrderStatus, PaymentOrder

__all__ = ["OrderStatus", "PaymentOrder"]
