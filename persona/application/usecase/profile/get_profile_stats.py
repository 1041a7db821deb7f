"""Get profile stats use case."""

from persona.application.usecase.base import ApiModel
from persona.domain.service import ProfileService


class GetProfileStatsResponse(ApiModel):
    success: bool = True
    total_profiles: int
    mbti_distribution: dict[str, int]


class GetProfileStatsUseCase:
    """Use case for profile counts by MBTI type."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self) -> GetProfileStatsResponse:
        stats = await self.profile_service.get_stats()
        return GetProfileStatsResponse(
            total_profiles=stats.total_profiles,
            mbti_distribution=stats.mbti_distribution,
        )
