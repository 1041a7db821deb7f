"""Domain value objects for listing, ranking and voter identity."""

import math
from enum import Enum

from pydantic import field_validator

from persona.domain.error import ValidationError
from persona.domain.value.common import RootValueObject, ValueObject
from persona.domain.value.personality import PersonalitySystem


class CommentSortOrder(str, Enum):
    """Sort order for comment listings."""

    RECENT = "recent"  # createdAt descending
    OLDEST = "oldest"  # createdAt ascending
    BEST = "best"  # totalVotes descending, then createdAt descending


class CommentFilter(str, Enum):
    """Restricts listings to comments carrying votes under one system."""

    ALL = "all"
    MBTI = "mbti"
    ENNEAGRAM = "enneagram"
    ZODIAC = "zodiac"

    @property
    def personality_system(self) -> PersonalitySystem | None:
        if self is CommentFilter.ALL:
            return None
        return PersonalitySystem(self.value)


class VoterKey(RootValueObject[str]):
    """Anonymous voter identifier derived from connection metadata.

    Only ``[A-Za-z0-9_-]`` survives derivation, so keys are safe to log
    and to store as-is.
    """

    @field_validator("root")
    @classmethod
    def validate_voter_key(cls, v: str) -> str:
        if not v:
            raise ValueError("Voter key must not be empty")
        return v


class VoterMetadata(ValueObject):
    """Connection metadata a voter key is derived from."""

    forwarded_for: str | None = None
    remote_addr: str | None = None
    user_agent: str | None = None


class Pagination(ValueObject):
    """Page position within a listing plus the listing's true totals."""

    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_totals(cls, page: int, limit: int, total_count: int) -> "Pagination":
        total_pages = math.ceil(total_count / limit) if limit else 0
        return cls(
            page=page,
            limit=limit,
            total_count=total_count,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def check_page_request(page: int, limit: int, max_limit: int) -> None:
    """Validate a requested page position.

    Raises:
        ValidationError: If page < 1 or limit is outside 1..max_limit
    """
    details: dict[str, str] = {}
    if page < 1:
        details["page"] = "Page must be at least 1"
    if limit < 1 or limit > max_limit:
        details["limit"] = f"Limit must be between 1 and {max_limit}"
    if details:
        field = next(iter(details))
        raise ValidationError(field, details[field], details)
