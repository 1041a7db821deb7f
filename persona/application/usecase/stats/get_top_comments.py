"""Get top comments use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem, parse_optional_system
from persona.domain.service import StatsReporter
from persona.domain.value import PersonalitySystem


class GetTopCommentsRequest(ApiModel):
    """Get top comments request."""

    personality_system: Optional[str] = None
    limit: Optional[int] = None


class GetTopCommentsResponse(ApiModel):
    """Get top comments response."""

    success: bool = True
    personality_system: Optional[PersonalitySystem] = None
    comments: list[CommentItem]


class GetTopCommentsUseCase:
    """Use case for the most-voted comments."""

    def __init__(self, stats_reporter: StatsReporter) -> None:
        self.stats_reporter = stats_reporter

    async def execute(self, request: GetTopCommentsRequest) -> GetTopCommentsResponse:
        system = parse_optional_system(request.personality_system)
        comments = await self.stats_reporter.top_comments(system, request.limit)
        return GetTopCommentsResponse(
            personality_system=system,
            comments=[CommentItem.from_domain(c) for c in comments],
        )
