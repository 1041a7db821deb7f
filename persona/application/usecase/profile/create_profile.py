"""Create profile use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import ProfileItem
from persona.domain.model import Profile
from persona.domain.model.profile import (
    EnneagramCode,
    ImageUrl,
    InstinctVariant,
    MbtiCode,
    ProfileDescription,
    ProfileIdField,
    ProfileName,
    PsycheCode,
    SloanCode,
    SocionicsCode,
    Tritype,
)
from persona.domain.service import ProfileService
from persona.domain.value import ProfileId


class CreateProfileRequest(ApiModel):
    """Create profile request."""

    profile_id: ProfileIdField
    name: ProfileName
    description: ProfileDescription
    mbti: MbtiCode
    enneagram: EnneagramCode
    variant: InstinctVariant
    tritype: Tritype
    socionics: SocionicsCode
    sloan: SloanCode
    psyche: PsycheCode
    image: ImageUrl


class CreateProfileResponse(ApiModel):
    success: bool = True
    message: str = "Profile created successfully"
    profile: ProfileItem


class CreateProfileUseCase:
    """Use case for creating a profile under a caller-chosen ID."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> CreateProfileResponse:
        """Execute create profile flow.

        Raises:
            DuplicateProfileError: If the profile ID is already taken
        """
        fields = request.model_dump(exclude={"profile_id"})
        profile = await self.profile_service.create_profile(
            Profile(id=ProfileId(request.profile_id), **fields)
        )
        return CreateProfileResponse(profile=ProfileItem.from_domain(profile))
