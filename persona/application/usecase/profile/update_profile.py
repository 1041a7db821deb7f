"""Update profile use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import ProfileItem
from persona.domain.error import ValidationError
from persona.domain.model.profile import (
    EnneagramCode,
    ImageUrl,
    InstinctVariant,
    MbtiCode,
    ProfileDescription,
    ProfileName,
    PsycheCode,
    SloanCode,
    SocionicsCode,
    Tritype,
)
from persona.domain.service import ProfileService
from persona.domain.value import ProfileId


class ProfileChanges(ApiModel):
    """Profile fields to change. The profile ID itself is immutable."""

    name: Optional[ProfileName] = None
    description: Optional[ProfileDescription] = None
    mbti: Optional[MbtiCode] = None
    enneagram: Optional[EnneagramCode] = None
    variant: Optional[InstinctVariant] = None
    tritype: Optional[Tritype] = None
    socionics: Optional[SocionicsCode] = None
    sloan: Optional[SloanCode] = None
    psyche: Optional[PsycheCode] = None
    image: Optional[ImageUrl] = None


class UpdateProfileRequest(ApiModel):
    profile_id: int
    changes: ProfileChanges


class UpdateProfileResponse(ApiModel):
    success: bool = True
    message: str = "Profile updated successfully"
    profile: ProfileItem


class UpdateProfileUseCase:
    """Use case for partially updating a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            ValidationError: If no field is being changed
            NotFoundError: If the profile does not exist
        """
        changes = request.changes.model_dump(exclude_none=True)
        if not changes:
            raise ValidationError("body", "At least one field must be provided")

        profile = await self.profile_service.update_profile(
            ProfileId(request.profile_id), changes
        )
        return UpdateProfileResponse(profile=ProfileItem.from_domain(profile))
