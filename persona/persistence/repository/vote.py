"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

import logfire

from persona.domain.error import DuplicateVoteError
from persona.domain.model import Vote, VoteUpsert
from persona.domain.repository import VoteRepository
from persona.domain.value import CommentId, PersonalitySystem, VoterKey
from persona.persistence.mappers import row_to_vote, vote_to_dict
from persona.persistence.tables import votes_table

UNIQUE_VOTE_CONSTRAINT = "uq_votes_comment_voter_system"

# Attempts before a vote key that keeps disappearing under the write is reported
UPSERT_ATTEMPTS = 2


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, vote: Vote) -> VoteUpsert:
        """Insert the vote, or lock and update the vote already at its key.

        The unique constraint decides which concurrent writer creates the
        vote. A losing writer waits for the winner's transaction, then
        locks the committed row and replaces its value.
        """
        for _ in range(UPSERT_ATTEMPTS):
            stmt = (
                pg_insert(votes_table)
                .values(**vote_to_dict(vote))
                .on_conflict_do_nothing(constraint=UNIQUE_VOTE_CONSTRAINT)
                .returning(*votes_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is not None:
                await self.session.flush()
                return VoteUpsert(vote=row_to_vote(row._asdict()))

            stmt = (
                select(votes_table)
                .where(
                    self._key(
                        vote.comment_id, vote.voter_identifier, vote.personality_system
                    )
                )
                .with_for_update()
            )
            result = await self.session.execute(stmt)
            existing = result.fetchone()
            if existing is None:
                # Removed between the insert attempt and the lock
                logfire.warn(
                    "Vote vanished during upsert, retrying",
                    comment_id=str(vote.comment_id),
                    personality_system=vote.personality_system.value,
                )
                continue

            previous_value = existing.personality_value
            if previous_value == vote.personality_value:
                return VoteUpsert(
                    vote=row_to_vote(existing._asdict()), previous_value=previous_value
                )

            stmt = (
                update(votes_table)
                .where(votes_table.c.id == existing.id)
                .values(
                    personality_value=vote.personality_value,
                    profile_id=vote.profile_id,
                    updated_at=vote.updated_at,
                )
                .returning(*votes_table.c)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return VoteUpsert(
                vote=row_to_vote(row._asdict()), previous_value=previous_value
            )

        raise DuplicateVoteError(
            str(vote.comment_id),
            vote.personality_system.value,
            vote.voter_identifier.root,
        )

    async def find_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Find the vote at a unique key."""
        stmt = select(votes_table).where(
            self._key(comment_id, voter_identifier, personality_system)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def delete_by_key(
        self,
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ) -> Optional[Vote]:
        """Delete the vote at a unique key and return it."""
        stmt = (
            delete(votes_table)
            .where(self._key(comment_id, voter_identifier, personality_system))
            .returning(*votes_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Vote]:
        """Find votes on a comment, newest first."""
        conditions = [votes_table.c.comment_id == comment_id]
        if personality_system is not None:
            conditions.append(
                votes_table.c.personality_system == personality_system.value
            )
        stmt = (
            select(votes_table)
            .where(and_(*conditions))
            .order_by(votes_table.c.created_at.desc(), votes_table.c.id.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_comment(
        self,
        comment_id: CommentId,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count votes on a comment."""
        conditions = [votes_table.c.comment_id == comment_id]
        if personality_system is not None:
            conditions.append(
                votes_table.c.personality_system == personality_system.value
            )
        stmt = select(func.count()).select_from(votes_table).where(and_(*conditions))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Vote]:
        """Find a voter's votes, newest first."""
        stmt = (
            select(votes_table)
            .where(and_(*self._voter_filters(voter_identifier, personality_system)))
            .order_by(votes_table.c.created_at.desc(), votes_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_voter(
        self,
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count a voter's votes."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(and_(*self._voter_filters(voter_identifier, personality_system)))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _key(
        comment_id: CommentId,
        voter_identifier: VoterKey,
        personality_system: PersonalitySystem,
    ):
        return and_(
            votes_table.c.comment_id == comment_id,
            votes_table.c.voter_identifier == voter_identifier.root,
            votes_table.c.personality_system == personality_system.value,
        )

    @staticmethod
    def _voter_filters(
        voter_identifier: VoterKey,
        personality_system: Optional[PersonalitySystem],
    ) -> list:
        conditions = [votes_table.c.voter_identifier == voter_identifier.root]
        if personality_system is not None:
            conditions.append(
                votes_table.c.personality_system == personality_system.value
            )
        return conditions
