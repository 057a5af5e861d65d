"""Store interface for identities.

The identity record is Django's auth user, so this store hands out
``accounts.models.User`` instances rather than frozen domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID

from accounts.models import User


class UserStore(ABC):
    @abstractmethod
    def get_by_id(self, user_id: UUID) -> User | None:
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        ...

    @abstractmethod
    def create_user(self, email: str, password: str, **fields) -> User:
        ...

    @abstractmethod
    def save(self, user: User, fields: list[str] | None = None) -> None:
        ...

    @abstractmethod
    def get_by_reset_token(self, token_hash: str, now: datetime) -> User | None:
        """Return the user owning an unexpired reset token."""
        ...

    @abstractmethod
    def get_by_verification_token(self, token_hash: str) -> User | None:
        ...
