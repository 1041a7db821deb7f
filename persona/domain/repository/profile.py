"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from persona.domain.model import Profile
from persona.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile entities."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        pass

    @abstractmethod
    async def exists(self, profile_id: ProfileId) -> bool:
        """Check whether a profile exists."""
        pass

    @abstractmethod
    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Profile]:
        """Find profiles ordered by ID."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create a new profile.

        Raises:
            DuplicateProfileError: If a profile with the same ID exists
        """
        pass

    @abstractmethod
    async def update(
        self, profile_id: ProfileId, changes: dict[str, Any]
    ) -> Optional[Profile]:
        """Apply field changes to a profile.

        Returns:
            Updated profile, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, profile_id: ProfileId) -> bool:
        """Delete a profile.

        Returns:
            True if a profile was deleted
        """
        pass

    @abstractmethod
    async def count_by_mbti(self) -> dict[str, int]:
        """Count profiles per MBTI type."""
        pass
