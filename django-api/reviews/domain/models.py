from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

ASPECTS = ("organization", "venue", "content", "value")


class ModerationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ReviewSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST = "highest"
    LOWEST = "lowest"
    HELPFUL = "helpful"


@dataclass(frozen=True)
class Review:
    id: UUID
    user_id: UUID
    event_id: UUID
    booking_id: UUID
    rating: int
    comment: str
    moderation_status: ModerationStatus
    created_at: datetime
    updated_at: datetime
    title: str = ""
    aspects: dict = field(default_factory=dict)
    user_name: str = ""
    event_title: str = ""
    is_verified: bool = False
    is_public: bool = True
    helpful_votes: int = 0
    report_count: int = 0
    moderation_notes: str = ""
