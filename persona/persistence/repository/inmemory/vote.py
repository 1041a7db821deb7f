"""In-memory vote repository for testing."""

import asyncio
from typing import Optional

from persona.domain.model import Vote, VoteUpsert
from persona.domain.repository.vote import VoteRepository
from persona.domain.value import CommentId, PersonalitySystem, VoterKey

VoteKey = tuple[CommentId, str, PersonalitySystem]


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing.

    Votes are stored by their unique key, so the one-vote-per-key rule
    holds by construction. Writes yield once and then mutate atomically.
    """

    def __init__(self) -> None:
        self._votes: dict[VoteKey, Vote] = {}

    async def upsert(self, vote: Vote) -> VoteUpsert:
        """Insert the vote or replace the value at its key."""
        await asyncio.sleep(0)
        key = self._key(vote.comment_id, vote.voter_identifier, vote.personality_system)
        existing = self._votes.get(key)
        if existing is None:
            self._votes[key] = vote
            return VoteUpsert(vote=vote)

        if existing.personality_value == vote.personality_value:
            return VoteUpsert(vote=existing, previous_value=existing.personality_value)

        # Identity and creation time survive a value change
        updated = existing.model_copy(
            update={
                "personality_value": vote.personality_value,
                "profile_id": vote.profile_id,
                "updated_at": vote.updated_at,
            }
        )
        self._votes[key] = updated
        return VoteUpsert(vote=updated, previous_value=existing.personality_value)

    async def find_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Find the vote at a unique key."""
        return self._votes.get(
            self._key(comment_id, voter_identifier, personality_system)
        )

    async def delete_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Delete the vote at a unique key and return it."""
        await asyncio.sleep(0)
        return self._votes.pop(
            self._key(comment_id, voter_identifier, personality_system), None
        )

    async def find_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Vote]:
        """Find votes on a comment, newest first."""
        votes = self._newest_first(
            v
            for v in self._votes.values()
            if v.comment_id == comment_id
            and (personality_system is None or v.personality_system == personality_system)
        )
        end = None if limit is None else offset + limit
        return votes[offset:end]

    async def count_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count votes on a comment."""
        return len(await self.find_by_comment(comment_id, personality_system))

    async def find_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Vote]:
        """Find a voter's votes, newest first."""
        votes = self._newest_first(
            v
            for v in self._votes.values()
            if v.voter_identifier == voter_identifier
            and (personality_system is None or v.personality_system == personality_system)
        )
        return votes[offset : offset + limit]

    async def count_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count a voter's votes."""
        return sum(
            1
            for v in self._votes.values()
            if v.voter_identifier == voter_identifier
            and (personality_system is None or v.personality_system == personality_system)
        )

    def drop_for_comments(self, comment_ids: list[CommentId]) -> None:
        """Remove every vote cast on the given comments."""
        doomed = set(comment_ids)
        self._votes = {k: v for k, v in self._votes.items() if k[0] not in doomed}

    @staticmethod
    def _key(
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> VoteKey:
        return (comment_id, voter_identifier.root, personality_system)

    @staticmethod
    def _newest_first(votes) -> list[Vote]:
        return sorted(votes, key=lambda v: (v.created_at, str(v.id)), reverse=True)
