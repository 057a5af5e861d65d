"""Shared domain primitives."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar
from uuid import UUID

T = TypeVar("T")


class Role(str, Enum):
    ATTENDEE = "attendee"
    ORGANIZER = "organizer"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    """The authenticated caller, as seen by services."""

    id: UUID
    role: Role
    email: str = ""
    phone: str = ""
    name: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list query plus the unpaginated total."""

    items: tuple[T, ...]
    total: int


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page/limit pair."""

    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
