"""Human-legible identifiers: a base-36 millisecond timestamp plus a random hex suffix."""

import secrets
import string
import time

_DIGITS = string.digits + string.ascii_uppercase


def _base36(number: int) -> str:
    encoded = ""
    while number:
        number, remainder = divmod(number, 36)
        encoded = _DIGITS[remainder] + encoded
    return encoded or "0"


def _stamp() -> str:
    return _base36(time.time_ns() // 1_000_000)


def generate_booking_number() -> str:
    return f"BK{_stamp()}{secrets.token_hex(2).upper()}"


def generate_ticket_code() -> str:
    return f"TK{_stamp()}{secrets.token_hex(3).upper()}"
