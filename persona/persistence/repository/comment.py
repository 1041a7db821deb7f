"""PostgreSQL implementation of Comment repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, func, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.model import Comment, TallyUpdate
from persona.domain.repository import CommentRepository
from persona.domain.value import (
    CommentId,
    CommentSortOrder,
    PersonalitySystem,
    ProfileId,
    VoteDelta,
    VoteStats,
)
from persona.persistence.mappers import (
    comment_to_dict,
    json_to_vote_stats,
    row_to_comment,
    vote_stats_to_json,
)
from persona.persistence.tables import comments_table

# Expands every visible comment's tally into (system, value, count) rows
_SUM_VOTE_STATS_SQL = """
    SELECT s.key AS personality_system,
           v.key AS personality_value,
           SUM(v.value::int) AS vote_count
    FROM comments c
    CROSS JOIN LATERAL jsonb_each(c.vote_stats) AS s(key, value)
    CROSS JOIN LATERAL jsonb_each_text(s.value) AS v(key, value)
    WHERE c.is_visible {comment_clause}
    GROUP BY s.key, v.key
"""


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(self, comment_ids: Sequence[CommentId]) -> list[Comment]:
        """Find several comments by ID (batch query)."""
        if not comment_ids:
            return []
        stmt = select(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Create a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self,
        comment_id: CommentId,
        content: Optional[str] = None,
        title: Optional[str] = None,
        is_visible: Optional[bool] = None,
    ) -> Optional[Comment]:
        """Update editable fields; vote_stats and total_votes are left alone."""
        values: dict = {"updated_at": func.now()}
        if content is not None:
            values["content"] = content
        if title is not None:
            values["title"] = title
        if is_visible is not None:
            values["is_visible"] = is_visible

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(**values)
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find visible comments with filtering, sorting and pagination."""
        stmt = select(comments_table).where(
            and_(*self._filters(profile_id, personality_system))
        )

        # id is the final tie-break so pages never overlap
        if sort == CommentSortOrder.BEST:
            stmt = stmt.order_by(
                comments_table.c.total_votes.desc(),
                comments_table.c.created_at.desc(),
                comments_table.c.id.desc(),
            )
        elif sort == CommentSortOrder.OLDEST:
            stmt = stmt.order_by(
                comments_table.c.created_at.asc(), comments_table.c.id.asc()
            )
        else:
            stmt = stmt.order_by(
                comments_table.c.created_at.desc(), comments_table.c.id.desc()
            )

        stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        profile_id: Optional[ProfileId] = None,
        personality_system: Optional[PersonalitySystem] = None,
    ) -> int:
        """Count visible comments matching the filters."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(and_(*self._filters(profile_id, personality_system)))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def apply_vote_delta(
        self, comment_id: CommentId, delta: VoteDelta
    ) -> Optional[TallyUpdate]:
        """Apply a vote delta under a row lock on the comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        tally = row_to_comment(row._asdict()).apply_vote_delta(delta)
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                vote_stats=vote_stats_to_json(tally.comment.vote_stats),
                total_votes=tally.comment.total_votes,
                updated_at=tally.comment.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return tally

    async def sum_vote_stats(
        self, comment_id: Optional[CommentId] = None
    ) -> VoteStats:
        """Sum tallies in the database without loading comment rows."""
        params = {}
        comment_clause = ""
        if comment_id is not None:
            comment_clause = "AND c.id = :comment_id"
            params["comment_id"] = comment_id

        result = await self.session.execute(
            text(_SUM_VOTE_STATS_SQL.format(comment_clause=comment_clause)), params
        )
        document: dict[str, dict[str, int]] = {}
        for row in result.fetchall():
            document.setdefault(row.personality_system, {})[row.personality_value] = (
                int(row.vote_count)
            )
        return json_to_vote_stats(document)

    @staticmethod
    def _filters(
        profile_id: Optional[ProfileId],
        personality_system: Optional[PersonalitySystem],
    ) -> list:
        conditions = [comments_table.c.is_visible.is_(True)]
        if profile_id is not None:
            conditions.append(comments_table.c.profile_id == profile_id)
        if personality_system is not None:
            # Zeroed values are dropped from the tally, so a non-empty
            # bucket means at least one vote under the system
            conditions.append(
                comments_table.c.vote_stats[personality_system.value].astext != "{}"
            )
        return conditions
