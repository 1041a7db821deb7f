"""In-memory profile repository for testing."""

import asyncio
from collections import Counter
from typing import Any, Optional

from persona.domain.error import DuplicateProfileError
from persona.domain.model import Profile
from persona.domain.repository.profile import ProfileRepository
from persona.domain.value import ProfileId
from persona.persistence.repository.inmemory.comment import InMemoryCommentRepository
from persona.persistence.repository.inmemory.vote import InMemoryVoteRepository


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    When given the comment and vote repositories, deleting a profile also
    removes its comments and their votes, as the foreign keys do in Postgres.
    """

    def __init__(
        self,
        comments: Optional[InMemoryCommentRepository] = None,
        votes: Optional[InMemoryVoteRepository] = None,
    ) -> None:
        self._profiles: dict[ProfileId, Profile] = {}
        self._comments = comments
        self._votes = votes

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def exists(self, profile_id: ProfileId) -> bool:
        """Check whether a profile exists."""
        return profile_id in self._profiles

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Profile]:
        """Find profiles ordered by ID."""
        profiles = sorted(self._profiles.values(), key=lambda p: p.id)
        end = None if limit is None else offset + limit
        return profiles[offset:end]

    async def count(self) -> int:
        """Count all profiles."""
        return len(self._profiles)

    async def save(self, profile: Profile) -> Profile:
        """Create a new profile."""
        await asyncio.sleep(0)
        if profile.id in self._profiles:
            raise DuplicateProfileError(profile.id)
        self._profiles[profile.id] = profile
        return profile

    async def update(
        self, profile_id: ProfileId, changes: dict[str, Any]
    ) -> Optional[Profile]:
        """Apply field changes to a profile."""
        await asyncio.sleep(0)
        profile = self._profiles.get(profile_id)
        if profile is None:
            return None
        updated = Profile(**{**profile.model_dump(), **changes})
        self._profiles[profile_id] = updated
        return updated

    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile and cascade to its comments and votes."""
        await asyncio.sleep(0)
        if self._profiles.pop(profile_id, None) is None:
            return False
        if self._comments is not None:
            dropped = self._comments.drop_for_profile(profile_id)
            if self._votes is not None:
                self._votes.drop_for_comments(dropped)
        return True

    async def count_by_mbti(self) -> dict[str, int]:
        """Count profiles per MBTI type."""
        counts = Counter(p.mbti for p in self._profiles.values())
        return dict(sorted(counts.items(), key=lambda item: (-item[1], item[0])))
