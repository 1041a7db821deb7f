"""Get personality stats use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import parse_comment_id
from persona.domain.service import StatsReporter
from persona.domain.value import PersonalitySystem


class PersonalityDistribution(ApiModel):
    """Vote histogram for one personality system."""

    personality_system: PersonalitySystem
    distribution: dict[str, int]
    total_votes: int


class GetPersonalityStatsRequest(ApiModel):
    """Get personality stats request."""

    comment_id: Optional[str] = None


class GetPersonalityStatsResponse(ApiModel):
    """Get personality stats response."""

    success: bool = True
    comment_id: Optional[str] = None
    stats: list[PersonalityDistribution]


class GetPersonalityStatsUseCase:
    """Use case for vote distributions across all comments or one comment."""

    def __init__(self, stats_reporter: StatsReporter) -> None:
        """Initialize get personality stats use case.

        Args:
            stats_reporter: Stats reporter domain service
        """
        self.stats_reporter = stats_reporter

    async def execute(
        self, request: GetPersonalityStatsRequest
    ) -> GetPersonalityStatsResponse:
        """Execute get personality stats flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If a comment ID is given but the comment is hidden or absent
        """
        comment_id = (
            parse_comment_id(request.comment_id) if request.comment_id else None
        )
        distributions = await self.stats_reporter.global_stats(comment_id)
        return GetPersonalityStatsResponse(
            comment_id=str(comment_id) if comment_id else None,
            stats=[
                PersonalityDistribution(
                    personality_system=d.personality_system,
                    distribution=d.distribution,
                    total_votes=d.total_votes,
                )
                for d in distributions
            ],
        )
