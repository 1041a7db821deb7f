"""Comment entity.

Comments are posted on profiles and carry a denormalized tally of the
personality votes cast on them, so listings and statistics never need to
scan individual votes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from persona.domain.model.common import DomainModel
from persona.domain.value import (
    CommentId,
    PersonalitySystem,
    ProfileId,
    VoteDelta,
    VoteStats,
    empty_vote_stats,
)


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - total_votes equals the sum of every count in vote_stats
    - vote_stats never holds zero or negative counts (zeroed values are dropped)
    - Hidden comments (is_visible=False) are soft-deleted and cannot be voted on
    """

    id: CommentId
    profile_id: ProfileId
    content: str = Field(min_length=1, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=200)
    author: str = Field(min_length=1, max_length=100)
    is_visible: bool = True
    vote_stats: VoteStats = Field(default_factory=empty_vote_stats)
    total_votes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("vote_stats")
    @classmethod
    def validate_vote_stats(cls, v: VoteStats) -> VoteStats:
        """Ensure every system has a bucket and no count is negative."""
        stats = empty_vote_stats()
        for system, values in v.items():
            for value, count in values.items():
                if count < 0:
                    raise ValueError(f"Negative vote count for {system.value}/{value}")
                if count:
                    stats[system][value] = count
        return stats

    @property
    def tallied_votes(self) -> int:
        """Sum of all counts in vote_stats."""
        return sum(sum(values.values()) for values in self.vote_stats.values())

    def has_votes_for(self, system: PersonalitySystem) -> bool:
        return bool(self.vote_stats.get(system))

    def votes_for(self, system: PersonalitySystem) -> int:
        return sum(self.vote_stats.get(system, {}).values())

    def apply_vote_delta(self, delta: VoteDelta) -> "TallyUpdate":
        """Apply count changes and return the updated comment.

        Decrements that would take a count below zero are clamped at zero and
        reported in ``clamped_values``; total_votes moves only by what was
        actually applied, so the tally invariant holds either way.
        """
        stats = {system: dict(values) for system, values in self.vote_stats.items()}
        bucket = stats.setdefault(delta.personality_system, {})
        total = self.total_votes
        clamped: list[str] = []

        for value, change in delta.changes.items():
            current = bucket.get(value, 0)
            updated = current + change
            if updated < 0:
                clamped.append(value)
                updated = 0
            total += updated - current
            if updated:
                bucket[value] = updated
            else:
                bucket.pop(value, None)

        comment = self.model_copy(
            update={
                "vote_stats": stats,
                "total_votes": max(total, 0),
                "updated_at": datetime.now(),
            }
        )
        return TallyUpdate(comment=comment, clamped_values=clamped)


class TallyUpdate(DomainModel):
    """Outcome of applying a vote delta to a comment."""

    comment: Comment
    clamped_values: list[str] = Field(default_factory=list)
