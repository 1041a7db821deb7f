"""List profiles use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import PaginationInfo, ProfileItem
from persona.domain.service import ProfileService


class ListProfilesRequest(ApiModel):
    """List profiles request. Paginated only when both fields are given."""

    page: Optional[int] = None
    limit: Optional[int] = None


class ListProfilesResponse(ApiModel):
    success: bool = True
    profiles: list[ProfileItem]
    pagination: Optional[PaginationInfo] = None


class ListProfilesUseCase:
    """Use case for listing profiles in ID order."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self, request: ListProfilesRequest) -> ListProfilesResponse:
        profiles, pagination = await self.profile_service.list_profiles(
            page=request.page, limit=request.limit
        )
        return ListProfilesResponse(
            profiles=[ProfileItem.from_domain(p) for p in profiles],
            pagination=PaginationInfo.from_domain(pagination) if pagination else None,
        )
