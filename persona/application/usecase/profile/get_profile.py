"""Get profile use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import ProfileItem
from persona.domain.service import ProfileService
from persona.domain.value import ProfileId


class GetProfileRequest(ApiModel):
    profile_id: int


class GetProfileResponse(ApiModel):
    success: bool = True
    profile: ProfileItem


class GetProfileUseCase:
    """Use case for reading one profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        profile = await self.profile_service.get_profile(ProfileId(request.profile_id))
        return GetProfileResponse(profile=ProfileItem.from_domain(profile))
