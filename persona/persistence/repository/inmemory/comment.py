"""In-memory comment repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional, Sequence

from persona.domain.model import Comment, TallyUpdate
from persona.domain.repository.comment import CommentRepository
from persona.domain.value import (
    CommentId,
    CommentSortOrder,
    PersonalitySystem,
    ProfileId,
    VoteDelta,
    VoteStats,
    empty_vote_stats,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Each write yields to the event loop once before mutating, standing in
    for database I/O, and then mutates without further suspension, which
    keeps every call atomic.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments by ID."""
        return [self._comments[cid] for cid in comment_ids if cid in self._comments]

    async def save(self, comment: Comment) -> Comment:
        """Create a new comment."""
        await asyncio.sleep(0)
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        content: Optional[str] = None,
        title: Optional[str] = None,
        is_visible: Optional[bool] = None,
    ) -> Optional[Comment]:
        """Update editable fields of a comment."""
        await asyncio.sleep(0)
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        changes: dict = {"updated_at": datetime.now()}
        if content is not None:
            changes["content"] = content
        if title is not None:
            changes["title"] = title
        if is_visible is not None:
            changes["is_visible"] = is_visible

        # Rebuild through validation so edits obey the model constraints
        updated = Comment(**{**comment.model_dump(), **changes})
        self._comments[comment_id] = updated
        return updated

    async def find_all(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find visible comments with filtering, sorting and pagination."""
        comments = self._filter(profile_id, personality_system)

        # Sort (id is the final tie-break, matching the database ordering)
        if sort == CommentSortOrder.BEST:
            comments.sort(
                key=lambda c: (c.total_votes, c.created_at, str(c.id)), reverse=True
            )
        elif sort == CommentSortOrder.OLDEST:
            comments.sort(key=lambda c: (c.created_at, str(c.id)))
        else:
            comments.sort(key=lambda c: (c.created_at, str(c.id)), reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def count(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count visible comments matching the filters."""
        return len(self._filter(profile_id, personality_system))

    async def apply_vote_delta(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[TallyUpdate]:
        """Apply a vote delta as one uninterrupted read-modify-write."""
        await asyncio.sleep(0)
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        tally = comment.apply_vote_delta(delta)
        self._comments[comment_id] = tally.comment
        return tally

    async def sum_vote_stats(
        self, comment_id: Optional[CommentId] = None
    ) -> VoteStats:
        """Sum tallies across visible comments, or for a single comment."""
        totals = empty_vote_stats()
        for comment in self._comments.values():
            if not comment.is_visible:
                continue
            if comment_id is not None and comment.id != comment_id:
                continue
            for system, values in comment.vote_stats.items():
                for value, count in values.items():
                    totals[system][value] = totals[system].get(value, 0) + count
        return totals

    def drop_for_profile(self, profile_id: ProfileId) -> list[CommentId]:
        """Remove every comment on a profile, hidden ones included."""
        dropped = [
            cid for cid, c in self._comments.items() if c.profile_id == profile_id
        ]
        for comment_id in dropped:
            del self._comments[comment_id]
        return dropped

    def _filter(
        self,
        profile_id: Optional[ProfileId],
        personality_system: Optional[PersonalitySystem],
    ) -> list[Comment]:
        comments = [c for c in self._comments.values() if c.is_visible]
        if profile_id is not None:
            comments = [c for c in comments if c.profile_id == profile_id]
        if personality_system is not None:
            comments = [c for c in comments if c.has_votes_for(personality_system)]
        return comments
