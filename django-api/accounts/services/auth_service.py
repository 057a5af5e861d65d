"""Authentication and profile service.

Covers registration with e-mailed one-time codes, login, password changes
and the token-based reset and verification flows.
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta

from django.conf import settings
from django.utils import timezone

from accounts.domain.errors import (
    AccountDeactivatedError,
    AlreadyVerifiedError,
    EmailDeliveryError,
    EmailNotVerifiedError,
    InvalidCredentialsError,
    InvalidOtpError,
    InvalidTokenError,
    UnknownUserError,
    UserExistsError,
    UserNotFoundError,
    WrongPasswordError,
)
from accounts.models import User
from accounts.stores.interfaces import UserStore
from notifications.mailer import Mailer

logger = logging.getLogger(__name__)

PROFILE_FIELDS = ("first_name", "last_name", "phone", "bio", "location", "preferences")


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


def generate_otp() -> str:
    return f"{secrets.randbelow(900000) + 100000}"


class AuthService:
    def __init__(self, store: UserStore, mailer: Mailer) -> None:
        self._store = store
        self._mailer = mailer

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: str = User.Role.ATTENDEE,
        phone: str = "",
    ) -> User:
        if self._store.email_exists(email):
            raise UserExistsError()

        user = self._store.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            role=role,
            phone=phone,
            is_verified=False,
        )
        self._issue_otp(user)
        logger.info("Registered user %s", user.pk)
        try:
            self._send_otp(user)
        except Exception:
            logger.exception("Could not send OTP to user %s", user.pk)
        return user

    def verify_otp(self, email: str, otp: str) -> None:
        user = self._unverified_user(email)
        if (
            not user.otp
            or user.otp_expires_at is None
            or not secrets.compare_digest(user.otp, otp)
            or user.otp_expires_at < self._now()
        ):
            raise InvalidOtpError()

        user.is_verified = True
        user.otp = ""
        user.otp_expires_at = None
        self._store.save(user, ["is_verified", "otp", "otp_expires_at"])

    def resend_otp(self, email: str) -> None:
        user = self._unverified_user(email)
        self._issue_otp(user)
        self._send_otp(user)

    def login(self, email: str, password: str) -> User:
        user = self._store.get_by_email(email)
        if user is None or not user.check_password(password):
            raise InvalidCredentialsError()
        if not user.is_verified:
            raise EmailNotVerifiedError()
        if not user.is_active:
            raise AccountDeactivatedError()

        user.last_login = self._now()
        self._store.save(user, ["last_login"])
        return user

    def update_profile(self, user: User, changes: dict) -> User:
        fields = [name for name in PROFILE_FIELDS if name in changes]
        for name in fields:
            setattr(user, name, changes[name])
        if fields:
            self._store.save(user, fields)
        return user

    def update_avatar(self, user: User, avatar: str) -> User:
        user.avatar = avatar
        self._store.save(user, ["avatar"])
        return user

    def deactivate(self, user: User) -> None:
        user.is_active = False
        self._store.save(user, ["is_active"])
        logger.info("Deactivated user %s", user.pk)

    def change_password(self, user: User, current_password: str, new_password: str) -> User:
        if not user.check_password(current_password):
            raise WrongPasswordError()
        user.set_password(new_password)
        self._store.save(user, ["password"])
        return user

    def forgot_password(self, email: str, reset_url_base: str) -> None:
        user = self._store.get_by_email(email)
        if user is None:
            raise UserNotFoundError("No user found with that email")

        token = secrets.token_hex(20)
        ttl = settings.EVENTHUB["RESET_TOKEN_TTL_MINUTES"]
        user.reset_password_token = hash_token(token)
        user.reset_password_expires_at = self._now() + timedelta(minutes=ttl)
        self._store.save(user, ["reset_password_token", "reset_password_expires_at"])

        try:
            self._mailer.send(
                to=user.email,
                subject="EventHub - Password Reset",
                message=(
                    "You are receiving this email because you requested a password reset. "
                    f"Please make a PUT request to: {reset_url_base}{token}"
                ),
            )
        except Exception:
            logger.exception("Could not send reset email to user %s", user.pk)
            user.reset_password_token = ""
            user.reset_password_expires_at = None
            self._store.save(user, ["reset_password_token", "reset_password_expires_at"])
            raise EmailDeliveryError() from None

    def reset_password(self, token: str, password: str) -> User:
        user = self._store.get_by_reset_token(hash_token(token), self._now())
        if user is None:
            raise InvalidTokenError()

        user.set_password(password)
        user.reset_password_token = ""
        user.reset_password_expires_at = None
        self._store.save(user, ["password", "reset_password_token", "reset_password_expires_at"])
        return user

    def verify_email(self, token: str) -> None:
        user = self._store.get_by_verification_token(hash_token(token))
        if user is None:
            raise InvalidTokenError("Invalid verification token")
        user.is_verified = True
        user.verification_token = ""
        self._store.save(user, ["is_verified", "verification_token"])

    def _unverified_user(self, email: str) -> User:
        user = self._store.get_by_email(email)
        if user is None:
            raise UnknownUserError()
        if user.is_verified:
            raise AlreadyVerifiedError()
        return user

    def _issue_otp(self, user: User) -> None:
        user.otp = generate_otp()
        user.otp_expires_at = self._now() + timedelta(minutes=settings.EVENTHUB["OTP_TTL_MINUTES"])
        self._store.save(user, ["otp", "otp_expires_at"])

    def _send_otp(self, user: User) -> None:
        ttl = settings.EVENTHUB["OTP_TTL_MINUTES"]
        self._mailer.send(
            to=user.email,
            subject="Your EventHub OTP Verification Code",
            message=f"Your OTP code is: {user.otp}. It will expire in {ttl} minutes.",
        )
