"""Signed access tokens (HS256 JWT carrying the user id)."""

from datetime import datetime, timedelta, timezone

import jwt
from django.conf import settings


def issue_token(user_id) -> str:
    config = settings.JWT
    now = datetime.now(timezone.utc)
    payload = {
        "id": str(user_id),
        "iat": now,
        "exp": now + timedelta(days=config["EXPIRE_DAYS"]),
    }
    return jwt.encode(payload, config["SECRET"], algorithm=config["ALGORITHM"])


def decode_token(token: str) -> dict:
    """Return the token claims.

    Raises:
        jwt.InvalidTokenError: If the signature is bad or the token expired.
    """
    config = settings.JWT
    return jwt.decode(token, config["SECRET"], algorithms=[config["ALGORITHM"]])
