"""Integration tests for the Razorpay payment bridge.

The gateway's HTTP API is replaced with a fake; signatures are computed
with the test key secret the way the gateway computes them.
Run with: pytest tests/test_payments.py -v
"""

import hashlib
import hmac
from decimal import Decimal

import pytest
from django.conf import settings

from bookings.models import Booking
from payments.gateway import RazorpayGateway
from payments.models import PaymentOrder


def sign(order_id: str, payment_id: str) -> str:
    secret = settings.PAYMENT_GATEWAY["KEY_SECRET"]
    return hmac.new(
        secret.encode(), f"{order_id}|{payment_id}".encode(), hashlib.sha256
    ).hexdigest()


class FakeOrders:
    def __init__(self, calls: list, fail: bool = False) -> None:
        self.calls = calls
        self.fail = fail

    def create(self, data: dict) -> dict:
        if self.fail:
            raise RuntimeError("gateway down")
        self.calls.append(data)
        return {
            "id": f"order_TEST{len(self.calls)}",
            "amount": data["amount"],
            "currency": data["currency"],
            "receipt": data["receipt"],
            "status": "created",
        }


@pytest.fixture
def gateway_calls(monkeypatch) -> list:
    calls = []

    class FakeClient:
        def __init__(self, auth):
            self.order = FakeOrders(calls)

    monkeypatch.setattr("payments.gateway.razorpay.Client", FakeClient)
    return calls


def order_payload(event, quantity=2) -> dict:
    tier = event.ticket_types.get()
    return {
        "eventId": str(event.id),
        "items": [{"ticketTypeId": str(tier.id), "quantity": quantity}],
        "attendees": [{"firstName": "Asha", "lastName": "Rao", "email": "asha@example.com"}],
    }


@pytest.fixture
def create_order(client_for, gateway_calls):
    def _create_order(user, event, quantity=2):
        return client_for(user).post(
            "/api/payments/create-order", order_payload(event, quantity), format="json"
        )

    return _create_order


class TestSignature:
    """Tests for local checkout signature verification."""

    def test_matching_signature(self):
        gateway = RazorpayGateway("rzp_test_key", settings.PAYMENT_GATEWAY["KEY_SECRET"])
        assert gateway.verify_signature("order_1", "pay_1", sign("order_1", "pay_1"))

    def test_signature_for_other_payment(self):
        gateway = RazorpayGateway("rzp_test_key", settings.PAYMENT_GATEWAY["KEY_SECRET"])
        assert not gateway.verify_signature("order_1", "pay_2", sign("order_1", "pay_1"))


@pytest.mark.django_db
class TestCreateOrder:
    """Tests for POST /api/payments/create-order"""

    def test_opens_gateway_order_and_pending_booking(self, create_order, gateway_calls, attendee, make_event):
        event = make_event(tiers=[{"name": "General", "price": "2999", "quantity": 100, "sold": 25}])

        response = create_order(attendee, event)

        assert response.status_code == 200
        body = response.data
        assert body["key_id"] == "rzp_test_key"
        assert body["order"]["id"] == "order_TEST1"
        assert body["display_amount"] == Decimal("6180.44")
        assert body["paymentData"]["paymentStatus"] == "Pending"
        assert gateway_calls[0]["amount"] == 618044
        assert gateway_calls[0]["currency"] == "INR"
        assert gateway_calls[0]["receipt"].startswith("receipt_")
        assert gateway_calls[0]["notes"]["userEmail"] == attendee.email

        booking = Booking.objects.get(pk=body["booking"]["id"])
        assert booking.status == Booking.Status.PENDING
        assert booking.payment_method == "razorpay"
        assert booking.payment_order_id == PaymentOrder.objects.get().id
        assert event.ticket_types.get().sold == 25

    def test_validation_runs_before_gateway(self, create_order, gateway_calls, attendee, make_event):
        event = make_event(tiers=[{"name": "General", "price": "10", "quantity": 5}])

        response = create_order(attendee, event, quantity=6)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Not enough tickets available for General",
        }
        assert gateway_calls == []

    def test_gateway_failure(self, client_for, attendee, make_event, monkeypatch):
        class BrokenClient:
            def __init__(self, auth):
                self.order = FakeOrders([], fail=True)

        monkeypatch.setattr("payments.gateway.razorpay.Client", BrokenClient)
        event = make_event()

        response = client_for(attendee).post(
            "/api/payments/create-order", order_payload(event), format="json"
        )

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Cannot create order"}
        assert not Booking.objects.exists()

    def test_missing_keys(self, client_for, attendee, make_event, settings):
        settings.PAYMENT_GATEWAY = {"KEY_ID": "", "KEY_SECRET": "", "CURRENCY": "INR"}

        response = client_for(attendee).post(
            "/api/payments/create-order", order_payload(make_event()), format="json"
        )

        assert response.status_code == 500
        assert response.json()["error"] == "Cannot create order"


@pytest.mark.django_db
class TestVerifyPayment:
    """Tests for POST /api/payments/verify-payment"""

    def verify(self, client, order_id, payment_id="pay_ABC", signature=None):
        return client.post(
            "/api/payments/verify-payment",
            {
                "razorpay_order_id": order_id,
                "razorpay_payment_id": payment_id,
                "razorpay_signature": signature or sign(order_id, payment_id),
            },
            format="json",
        )

    def test_verify_confirms_booking_and_reserves(self, create_order, client_for, attendee, make_event):
        event = make_event(tiers=[{"name": "General", "price": "2999", "quantity": 100, "sold": 25}])
        order_id = create_order(attendee, event).data["order"]["id"]

        response = self.verify(client_for(attendee), order_id)

        assert response.status_code == 200
        body = response.data
        assert body["message"] == "Payment Verified Successfully"
        assert body["paid_amount"] == Decimal("6180.44")
        assert body["booking"]["status"] == "confirmed"
        assert body["booking"]["paymentStatus"] == "completed"
        assert event.ticket_types.get().sold == 27

        payment = PaymentOrder.objects.get()
        assert payment.status == PaymentOrder.Status.PAID
        assert payment.gateway_payment_id == "pay_ABC"
        booking = Booking.objects.get()
        assert booking.payment_details["transactionId"] == "pay_ABC"

    def test_replay_is_rejected(self, create_order, client_for, attendee, make_event):
        event = make_event()
        order_id = create_order(attendee, event).data["order"]["id"]
        client = client_for(attendee)
        self.verify(client, order_id)

        response = self.verify(client, order_id)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Payment already verified"}
        assert event.ticket_types.get().sold == 2

    def test_bad_signature(self, create_order, client_for, attendee, make_event):
        order_id = create_order(attendee, make_event()).data["order"]["id"]

        response = self.verify(client_for(attendee), order_id, signature="0" * 64)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Payment Verification Failed"}
        assert PaymentOrder.objects.get().status == PaymentOrder.Status.PENDING

    def test_unknown_order(self, client_for, attendee):
        response = self.verify(client_for(attendee), "order_MISSING")

        assert response.status_code == 404
        assert response.json()["error"] == "Order not found"

    def test_other_user_cannot_verify(self, create_order, client_for, attendee, make_user, make_event):
        order_id = create_order(attendee, make_event()).data["order"]["id"]

        response = self.verify(client_for(make_user()), order_id)

        assert response.status_code == 403
        assert response.json()["error"] == "Unauthorized"

    def test_sold_out_before_verification(self, create_order, client_for, attendee, make_event):
        event = make_event(tiers=[{"name": "General", "price": "100", "quantity": 2}])
        order_id = create_order(attendee, event).data["order"]["id"]
        event.ticket_types.update(sold=1)

        response = self.verify(client_for(attendee), order_id)

        assert response.status_code == 400
        assert response.json()["error"] == "Not enough tickets available for General"
        assert PaymentOrder.objects.get().status == PaymentOrder.Status.PENDING
        assert Booking.objects.get().status == Booking.Status.PENDING
        assert event.ticket_types.get().sold == 1

    def test_booking_cancelled_during_checkout(self, create_order, client_for, attendee, make_event):
        """Paying for a booking cancelled mid-checkout fails clearly and keeps the payment id."""
        event = make_event()
        created = create_order(attendee, event).data
        client = client_for(attendee)
        cancelled = client.put(f"/api/bookings/{created['booking']['id']}/cancel", {}, format="json")
        assert cancelled.status_code == 200

        response = self.verify(client, created["order"]["id"])

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Booking was cancelled before payment"}
        payment = PaymentOrder.objects.get()
        assert payment.status == PaymentOrder.Status.FAILED
        assert payment.gateway_payment_id == "pay_ABC"
        assert Booking.objects.get().status == Booking.Status.CANCELLED
        assert event.ticket_types.get().sold == 0

        retry = self.verify(client, created["order"]["id"])
        assert retry.json()["error"] == "Booking was cancelled before payment"
