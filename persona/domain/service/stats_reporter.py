"""Vote statistics domain service."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import Field

from persona.config import PaginationSettings
from persona.domain.error import NotFoundError, ValidationError
from persona.domain.model import Comment
from persona.domain.model.common import DomainModel
from persona.domain.repository import CommentRepository
from persona.domain.value import (
    CommentId,
    CommentSortOrder,
    PersonalitySystem,
    VoteStats,
)

from .base import Service


class CommentVoteStats(DomainModel):
    """Snapshot of one comment's tally."""

    comment_id: CommentId
    vote_stats: VoteStats
    total_votes: int
    last_updated: datetime


class SystemDistribution(DomainModel):
    """Vote histogram for one personality system."""

    personality_system: PersonalitySystem
    distribution: dict[str, int] = Field(default_factory=dict)
    total_votes: int = 0


class StatsReporter(Service):
    """Aggregates vote distributions from the denormalized comment tallies."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize stats reporter.

        Args:
            comment_repository: Comment repository
            pagination_settings: Page size limits
        """
        self.comment_repository = comment_repository
        self.pagination_settings = pagination_settings

    async def comment_stats(self, comment_id: CommentId) -> CommentVoteStats:
        """Tally snapshot for one comment.

        Raises:
            NotFoundError: If the comment does not exist or is hidden
        """
        comment = await self._get_visible_comment(comment_id)
        return CommentVoteStats(
            comment_id=comment.id,
            vote_stats=comment.vote_stats,
            total_votes=comment.total_votes,
            last_updated=comment.updated_at,
        )

    async def global_stats(
        self, comment_id: Optional[CommentId] = None
    ) -> list[SystemDistribution]:
        """Per-system vote histograms, for one comment or all visible comments.

        Values within each histogram are ordered by count, highest first.

        Raises:
            NotFoundError: If comment_id is given but the comment is absent or hidden
        """
        with logfire.span(
            "stats_reporter.global_stats",
            comment_id=str(comment_id) if comment_id else None,
        ):
            if comment_id is not None:
                stats = (await self._get_visible_comment(comment_id)).vote_stats
            else:
                stats = await self.comment_repository.sum_vote_stats()

            return [
                SystemDistribution(
                    personality_system=system,
                    distribution=dict(
                        sorted(
                            stats.get(system, {}).items(),
                            key=lambda item: (-item[1], item[0]),
                        )
                    ),
                    total_votes=sum(stats.get(system, {}).values()),
                )
                for system in PersonalitySystem
            ]

    async def top_comments(
        self,
        personality_system: Optional[PersonalitySystem] = None,
        limit: Optional[int] = None,
    ) -> list[Comment]:
        """Most-voted visible comments, ties broken by recency.

        Args:
            personality_system: Only consider comments with votes under this system
            limit: Number of comments to return

        Raises:
            ValidationError: If limit is out of range
        """
        if limit is None:
            limit = self.pagination_settings.top_comments_default_limit
        max_limit = self.pagination_settings.top_comments_max_limit
        if limit < 1 or limit > max_limit:
            raise ValidationError("limit", f"Limit must be between 1 and {max_limit}")

        return await self.comment_repository.find_all(
            personality_system=personality_system,
            sort=CommentSortOrder.BEST,
            limit=limit,
        )

    async def count_votes(
        self,
        comment_id: Optional[CommentId] = None,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count votes from the tallies, optionally scoped to a comment and/or system."""
        if comment_id is not None:
            comment = await self._get_visible_comment(comment_id)
            if personality_system is None:
                return comment.total_votes
            return comment.votes_for(personality_system)

        stats = await self.comment_repository.sum_vote_stats()
        if personality_system is not None:
            return sum(stats.get(personality_system, {}).values())
        return sum(sum(values.values()) for values in stats.values())

    async def _get_visible_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or not comment.is_visible:
            raise NotFoundError("Comment", str(comment_id))
        return comment
