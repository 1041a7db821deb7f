"""PostgreSQL implementation of Profile repository."""

from typing import Any, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from persona.domain.error import DuplicateProfileError
from persona.domain.model import Profile
from persona.domain.repository import ProfileRepository
from persona.domain.value import ProfileId
from persona.persistence.mappers import profile_to_dict, row_to_profile
from persona.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def exists(self, profile_id: ProfileId) -> bool:
        """Check whether a profile exists."""
        stmt = select(profiles_table.c.id).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Profile]:
        """Find profiles ordered by ID."""
        stmt = select(profiles_table).order_by(profiles_table.c.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_profile(row._asdict()) for row in result.fetchall()]

    async def count(self) -> int:
        """Count all profiles."""
        stmt = select(func.count()).select_from(profiles_table)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, profile: Profile) -> Profile:
        """Create a new profile."""
        stmt = insert(profiles_table).values(**profile_to_dict(profile))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise DuplicateProfileError(profile.id)
        return profile

    async def update(
        self, profile_id: ProfileId, changes: dict[str, Any]
    ) -> Optional[Profile]:
        """Apply field changes to a profile."""
        stmt = (
            update(profiles_table)
            .where(profiles_table.c.id == profile_id)
            .values(**changes)
            .returning(*profiles_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_profile(row._asdict()) if row else None

    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile (its comments and votes cascade)."""
        stmt = delete(profiles_table).where(profiles_table.c.id == profile_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_mbti(self) -> dict[str, int]:
        """Count profiles per MBTI type."""
        stmt = (
            select(profiles_table.c.mbti, func.count().label("profile_count"))
            .group_by(profiles_table.c.mbti)
            .order_by(func.count().desc(), profiles_table.c.mbti)
        )
        result = await self.session.execute(stmt)
        return {row.mbti: row.profile_count for row in result.fetchall()}
