"""Delete profile use case."""

from persona.application.usecase.base import ApiModel
from persona.domain.service import ProfileService
from persona.domain.value import ProfileId


class DeleteProfileRequest(ApiModel):
    profile_id: int


class DeleteProfileResponse(ApiModel):
    success: bool = True
    message: str = "Profile deleted successfully"


class DeleteProfileUseCase:
    """Use case for deleting a profile along with its comments and votes."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: DeleteProfileRequest) -> DeleteProfileResponse:
        await self.profile_service.delete_profile(ProfileId(request.profile_id))
        return DeleteProfileResponse()
