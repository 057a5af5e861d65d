"""Per-user views across the catalog and bookings.

Backs the public profile stats, the event and booking lists for one user
and the signed-in user's dashboard totals. Anyone may list an organizer's
published events; drafts and the booking list stay with the user and admins.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from django.utils import timezone

from accounts.domain.errors import UserAccessDeniedError, UserNotFoundError
from accounts.models import User
from accounts.stores.interfaces import UserStore
from bookings.domain import Booking, BookingStats
from bookings.stores.interfaces import BookingStore
from common.domain.models import Actor, Page, PageRequest
from events.domain import Event, EventFilters, EventStatus, OrganizerStats
from events.stores.interfaces import EventStore


@dataclass(frozen=True)
class PublicProfile:
    user: User
    stats: OrganizerStats


@dataclass(frozen=True)
class UserStats:
    bookings: BookingStats
    events: OrganizerStats


class UserActivityService:
    def __init__(self, users: UserStore, events: EventStore, bookings: BookingStore) -> None:
        self._users = users
        self._events = events
        self._bookings = bookings

    @staticmethod
    def _now() -> datetime:
        return timezone.now()

    def _user(self, user_id: UUID) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def profile(self, user_id: UUID) -> PublicProfile:
        user = self._user(user_id)
        return PublicProfile(user, self._events.organizer_stats(user.pk, self._now()))

    def user_events(
        self, actor: Actor | None, user_id: UUID, status: str | None, page: PageRequest
    ) -> Page[Event]:
        user = self._user(user_id)
        if actor is not None and (actor.id == user.pk or actor.is_admin):
            status = status or None
        else:
            status = EventStatus.PUBLISHED.value
        self._events.complete_ended_events(self._now())
        return self._events.list_events(EventFilters(status=status, organizer_id=user.pk), page)

    def user_bookings(
        self, actor: Actor, user_id: UUID, status: str | None, page: PageRequest
    ) -> Page[Booking]:
        user = self._user(user_id)
        if not (actor.id == user.pk or actor.is_admin):
            raise UserAccessDeniedError()
        return self._bookings.list_for_user(user.pk, status, page)

    def stats(self, actor: Actor) -> UserStats:
        now = self._now()
        return UserStats(
            bookings=self._bookings.stats_for_user(actor.id, now),
            events=self._events.organizer_stats(actor.id, now),
        )
