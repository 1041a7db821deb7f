"""Profile domain service."""

from datetime import datetime
from typing import Any, Optional

import logfire
from pydantic import Field

from persona.config import PaginationSettings
from persona.domain.error import DuplicateProfileError, NotFoundError
from persona.domain.model import Profile
from persona.domain.model.common import DomainModel
from persona.domain.repository import ProfileRepository
from persona.domain.value import Pagination, ProfileId, check_page_request

from .base import Service


class ProfileStats(DomainModel):
    """Profile counts by MBTI type."""

    total_profiles: int
    mbti_distribution: dict[str, int] = Field(default_factory=dict)


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            pagination_settings: Page size limits
        """
        self.profile_repository = profile_repository
        self.pagination_settings = pagination_settings

    async def get_profile(self, profile_id: ProfileId) -> Profile:
        """Get a profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        profile = await self.profile_repository.find_by_id(profile_id)
        if profile is None:
            raise NotFoundError("Profile", str(profile_id))
        return profile

    async def list_profiles(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> tuple[list[Profile], Optional[Pagination]]:
        """List profiles ordered by ID.

        Paginates only when both page and limit are given; otherwise returns
        every profile and no pagination.
        """
        if page is None or limit is None:
            return await self.profile_repository.find_all(), None

        check_page_request(page, limit, self.pagination_settings.profile_max_limit)
        pagination = Pagination.from_totals(
            page, limit, await self.profile_repository.count()
        )
        profiles = await self.profile_repository.find_all(
            limit=limit, offset=pagination.offset
        )
        return profiles, pagination

    async def create_profile(self, profile: Profile) -> Profile:
        """Create a profile under its externally assigned ID.

        Raises:
            DuplicateProfileError: If the ID is already taken
        """
        with logfire.span("profile_service.create_profile", profile_id=profile.id):
            if await self.profile_repository.exists(profile.id):
                logfire.warn("Duplicate profile", profile_id=profile.id)
                raise DuplicateProfileError(profile.id)
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", profile_id=saved.id)
            return saved

    async def update_profile(
        self, profile_id: ProfileId, changes: dict[str, Any]
    ) -> Profile:
        """Apply validated field changes to a profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span(
            "profile_service.update_profile",
            profile_id=profile_id,
            fields=sorted(changes),
        ):
            updated = await self.profile_repository.update(
                profile_id, {**changes, "updated_at": datetime.now()}
            )
            if updated is None:
                raise NotFoundError("Profile", str(profile_id))
            logfire.info("Profile updated", profile_id=profile_id)
            return updated

    async def delete_profile(self, profile_id: ProfileId) -> None:
        """Delete a profile.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.delete_profile", profile_id=profile_id):
            if not await self.profile_repository.delete(profile_id):
                raise NotFoundError("Profile", str(profile_id))
            logfire.info("Profile deleted", profile_id=profile_id)

    async def get_stats(self) -> ProfileStats:
        """Total profile count and MBTI distribution."""
        return ProfileStats(
            total_profiles=await self.profile_repository.count(),
            mbti_distribution=await self.profile_repository.count_by_mbti(),
        )
