"""Get vote count use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import parse_comment_id, parse_optional_system
from persona.domain.service import StatsReporter
from persona.domain.value import PersonalitySystem


class GetVoteCountRequest(ApiModel):
    """Get vote count request."""

    comment_id: Optional[str] = None
    personality_system: Optional[str] = None


class GetVoteCountResponse(ApiModel):
    """Get vote count response."""

    success: bool = True
    count: int
    comment_id: Optional[str] = None
    personality_system: Optional[PersonalitySystem] = None


class GetVoteCountUseCase:
    """Use case for counting votes, optionally per comment and/or system."""

    def __init__(self, stats_reporter: StatsReporter) -> None:
        self.stats_reporter = stats_reporter

    async def execute(self, request: GetVoteCountRequest) -> GetVoteCountResponse:
        comment_id = (
            parse_comment_id(request.comment_id) if request.comment_id else None
        )
        system = parse_optional_system(request.personality_system)
        count = await self.stats_reporter.count_votes(comment_id, system)
        return GetVoteCountResponse(
            count=count,
            comment_id=str(comment_id) if comment_id else None,
            personality_system=system,
        )
