"""Items and helpers shared across use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from persona.application.usecase.base import ApiModel
from persona.domain.error import ValidationError
from persona.domain.model import Comment, Profile, Vote
from persona.domain.value import CommentId, Pagination, PersonalitySystem


def parse_comment_id(raw: str) -> CommentId:
    """Parse a comment ID from its string form.

    Raises:
        ValidationError: If the ID is not a valid UUID
    """
    try:
        return CommentId(UUID(str(raw)))
    except ValueError:
        raise ValidationError("comment_id", "Invalid comment ID format")


def parse_optional_system(raw: Optional[str]) -> Optional[PersonalitySystem]:
    return PersonalitySystem.parse(raw) if raw else None


class PaginationInfo(ApiModel):
    """Pagination metadata in responses."""

    page: int
    limit: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_domain(cls, pagination: Pagination) -> "PaginationInfo":
        return cls(**pagination.model_dump())


class CommentItem(ApiModel):
    """Comment in responses."""

    id: str
    profile_id: int
    content: str
    title: Optional[str]
    author: str
    vote_stats: dict[str, dict[str, int]]
    total_votes: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            profile_id=comment.profile_id,
            content=comment.content,
            title=comment.title,
            author=comment.author,
            vote_stats={
                system.value: dict(values)
                for system, values in comment.vote_stats.items()
            },
            total_votes=comment.total_votes,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class VoteItem(ApiModel):
    """Vote in responses. The voter identifier is never exposed."""

    id: str
    comment_id: str
    profile_id: int
    personality_system: PersonalitySystem
    personality_value: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, vote: Vote) -> "VoteItem":
        return cls(
            id=str(vote.id),
            comment_id=str(vote.comment_id),
            profile_id=vote.profile_id,
            personality_system=vote.personality_system,
            personality_value=vote.personality_value,
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )


class ProfileItem(ApiModel):
    """Profile in responses."""

    profile_id: int
    name: str
    description: str
    mbti: str
    enneagram: str
    variant: str
    tritype: int
    socionics: str
    sloan: str
    psyche: str
    image: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileItem":
        data = profile.model_dump()
        data["profile_id"] = data.pop("id")
        return cls(**data)
