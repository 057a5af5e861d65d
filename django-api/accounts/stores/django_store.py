"""Django ORM implementation of the UserStore."""

from datetime import datetime
from uuid import UUID

from accounts.models import User
from accounts.stores.interfaces import UserStore


class DjangoUserStore(UserStore):
    def get_by_id(self, user_id: UUID) -> User | None:
        return User.objects.filter(pk=user_id).first()

    def get_by_email(self, email: str) -> User | None:
        return User.objects.filter(email__iexact=email).first()

    def email_exists(self, email: str) -> bool:
        return User.objects.filter(email__iexact=email).exists()

    def create_user(self, email: str, password: str, **fields) -> User:
        return User.objects.create_user(email=email, password=password, **fields)

    def save(self, user: User, fields: list[str] | None = None) -> None:
        user.save(update_fields=fields)

    def get_by_reset_token(self, token_hash: str, now: datetime) -> User | None:
        return User.objects.filter(
            reset_password_token=token_hash,
            reset_password_expires_at__gt=now,
        ).first()

    def get_by_verification_token(self, token_hash: str) -> User | None:
        return User.objects.filter(verification_token=token_hash).first()
