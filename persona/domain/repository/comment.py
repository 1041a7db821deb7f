"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from persona.domain.model import Comment, TallyUpdate
from persona.domain.value import (
    CommentId,
    CommentSortOrder,
    PersonalitySystem,
    ProfileId,
    VoteDelta,
    VoteStats,
)


class CommentRepository(ABC):
    """Repository for Comment entities."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, whether visible or hidden."""
        pass

    @abstractmethod
    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments by ID (batch query)."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a new comment."""
        pass

    @abstractmethod
    async def update_content(
        self,
        comment_id: CommentId,
        content: Optional[str] = None,
        title: Optional[str] = None,
        is_visible: Optional[bool] = None,
    ) -> Optional[Comment]:
        """Update editable fields of a comment.

        Only the given fields change; the vote tally is never written here.

        Args:
            comment_id: Comment to update
            content: New content, if changing
            title: New title, if changing
            is_visible: New visibility, if changing

        Returns:
            Updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find visible comments with filtering, sorting and pagination.

        Args:
            profile_id: Restrict to one profile's comments
            personality_system: Restrict to comments carrying votes under this system
            sort: Sort order
            limit: Page size
            offset: Number of comments to skip

        Returns:
            Comments in the requested order
        """
        pass

    @abstractmethod
    async def count(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count visible comments matching the same filters as find_all."""
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[TallyUpdate]:
        """Atomically apply a vote delta to a comment's tally.

        The read-modify-write must be serialized per comment so concurrent
        deltas never lose updates.

        Returns:
            Tally update, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def sum_vote_stats(
        self, comment_id: Optional[CommentId] = None
    ) -> VoteStats:
        """Sum tallies across all visible comments, or for a single comment."""
        pass
