"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from persona.domain.model import Vote, VoteUpsert
from persona.domain.value import CommentId, PersonalitySystem, VoterKey


class VoteRepository(ABC):
    """Repository for Vote entities.

    Votes are keyed by (comment_id, voter_identifier, personality_system);
    implementations must guarantee at most one vote per key.
    """

    @abstractmethod
    async def upsert(self, vote: Vote) -> VoteUpsert:
        """Insert a vote, or replace the value of the vote already at its key.

        The check and the write happen as one atomic step, so two
        concurrent upserts at the same key can never both create a vote.

        Args:
            vote: Vote to write

        Returns:
            Stored vote plus the value it replaced (None if newly created)

        Raises:
            DuplicateVoteError: If the key kept changing under the write
        """
        pass

    @abstractmethod
    async def find_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Find the vote at a unique key."""
        pass

    @abstractmethod
    async def delete_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Delete the vote at a unique key.

        Returns:
            The deleted vote, or None if no vote existed
        """
        pass

    @abstractmethod
    async def find_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Vote]:
        """Find votes on a comment, newest first."""
        pass

    @abstractmethod
    async def count_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count votes on a comment."""
        pass

    @abstractmethod
    async def find_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Vote]:
        """Find a voter's votes, newest first."""
        pass

    @abstractmethod
    async def count_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count a voter's votes."""
        pass
