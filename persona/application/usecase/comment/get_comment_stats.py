"""Get comment stats use case."""

from datetime import datetime

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem
from persona.domain.service import CommentService

TOP_COMMENTS_LIMIT = 10


class GetCommentStatsResponse(ApiModel):
    """Corpus-wide comment statistics."""

    success: bool = True
    total_comments: int
    top_comments: list[CommentItem]
    generated_at: datetime


class GetCommentStatsUseCase:
    """Use case for the comment overview."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self) -> GetCommentStatsResponse:
        overview = await self.comment_service.get_overview(TOP_COMMENTS_LIMIT)
        return GetCommentStatsResponse(
            total_comments=overview.total_comments,
            top_comments=[CommentItem.from_domain(c) for c in overview.top_comments],
            generated_at=overview.generated_at,
        )
