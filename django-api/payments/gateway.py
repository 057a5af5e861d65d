"""Razorpay client wrapper.

Orders are created through the Razorpay SDK. Checkout signatures are
checked locally: the gateway signs ``<order_id>|<payment_id>`` with the
account's key secret using HMAC-SHA256.
"""

import hashlib
import hmac
import logging

import razorpay
from django.conf import settings

from payments.domain.errors import OrderCreationError

logger = logging.getLogger(__name__)


class RazorpayGateway:
    def __init__(self, key_id: str, key_secret: str) -> None:
        self.key_id = key_id
        self._key_secret = key_secret

    @classmethod
    def from_settings(cls) -> "RazorpayGateway":
        config = settings.PAYMENT_GATEWAY
        return cls(config["KEY_ID"], config["KEY_SECRET"])

    def _client(self) -> razorpay.Client:
        return razorpay.Client(auth=(self.key_id, self._key_secret))

    def create_order(self, amount: int, currency: str, receipt: str, notes: dict) -> dict:
        """Create a gateway order for ``amount`` minor units."""
        if not self.key_id or not self._key_secret:
            logger.error("Razorpay keys are not configured")
            raise OrderCreationError()
        try:
            return self._client().order.create(
                {"amount": amount, "currency": currency, "receipt": receipt, "notes": notes}
            )
        except Exception:
            logger.exception("Razorpay order creation failed for receipt %s", receipt)
            raise OrderCreationError() from None

    def expected_signature(self, order_id: str, payment_id: str) -> str:
        message = f"{order_id}|{payment_id}".encode()
        return hmac.new(self._key_secret.encode(), message, hashlib.sha256).hexdigest()

    def verify_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        expected = self.expected_signature(order_id, payment_id)
        return hmac.compare_digest(expected.encode(), signature.encode())
