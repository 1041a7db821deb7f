"""Vote aggregator domain service."""

import logfire

from persona.domain.error import NotFoundError
from persona.domain.model import Comment
from persona.domain.repository import CommentRepository
from persona.domain.value import CommentId, PersonalitySystem, VoteDelta

from .base import Service


class VoteAggregator(Service):
    """Maintains the denormalized vote tally on comments.

    Every vote write is mirrored here as a delta against the parent
    comment's ``vote_stats`` and ``total_votes``. Deltas are applied by the
    repository under a per-comment lock, inside the same transaction as the
    vote write.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize vote aggregator.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def apply_new_vote(
        self, comment_id: CommentId, system: PersonalitySystem, value: str
    ) -> Comment:
        """Count a newly cast vote: value +1, total +1."""
        return await self._apply(comment_id, VoteDelta.new_vote(system, value))

    async def apply_vote_change(
        self,
        comment_id: CommentId,
        system: PersonalitySystem,
        old_value: str,
        new_value: str,
    ) -> Comment:
        """Move one vote from old_value to new_value; total unchanged."""
        if old_value == new_value:
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", str(comment_id))
            return comment
        return await self._apply(
            comment_id, VoteDelta.vote_change(system, old_value, new_value)
        )

    async def apply_vote_removal(
        self, comment_id: CommentId, system: PersonalitySystem, value: str
    ) -> Comment:
        """Uncount a removed vote: value -1, total -1, clamped at zero."""
        return await self._apply(comment_id, VoteDelta.vote_removal(system, value))

    async def _apply(self, comment_id: CommentId, delta: VoteDelta) -> Comment:
        with logfire.span(
            "vote_aggregator.apply",
            comment_id=str(comment_id),
            personality_system=delta.personality_system.value,
            changes=delta.changes,
        ):
            update = await self.comment_repository.apply_vote_delta(comment_id, delta)
            if update is None:
                logfire.warn("Vote delta on non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if update.clamped_values:
                # Tally and vote records disagree; needs reconciliation
                logfire.warn(
                    "Vote count clamped at zero",
                    comment_id=str(comment_id),
                    personality_system=delta.personality_system.value,
                    values=update.clamped_values,
                )

            return update.comment
