"""Get comment vote stats use case."""

from datetime import datetime

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import parse_comment_id
from persona.domain.service import StatsReporter


class GetCommentVoteStatsRequest(ApiModel):
    """Get comment vote stats request."""

    comment_id: str


class GetCommentVoteStatsResponse(ApiModel):
    """Tally snapshot for one comment."""

    success: bool = True
    comment_id: str
    vote_stats: dict[str, dict[str, int]]
    total_votes: int
    last_updated: datetime


class GetCommentVoteStatsUseCase:
    """Use case for reading one comment's vote tally."""

    def __init__(self, stats_reporter: StatsReporter) -> None:
        self.stats_reporter = stats_reporter

    async def execute(
        self, request: GetCommentVoteStatsRequest
    ) -> GetCommentVoteStatsResponse:
        stats = await self.stats_reporter.comment_stats(
            parse_comment_id(request.comment_id)
        )
        return GetCommentVoteStatsResponse(
            comment_id=str(stats.comment_id),
            vote_stats={
                system.value: dict(values)
                for system, values in stats.vote_stats.items()
            },
            total_votes=stats.total_votes,
            last_updated=stats.last_updated,
        )
