"""List comment votes use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import (
    PaginationInfo,
    VoteItem,
    parse_comment_id,
)
from persona.domain.service import VoteService


class ListCommentVotesRequest(ApiModel):
    """List comment votes request."""

    comment_id: str
    personality_system: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


class ListCommentVotesResponse(ApiModel):
    """List comment votes response."""

    success: bool = True
    comment_id: str
    votes: list[VoteItem]
    pagination: PaginationInfo


class ListCommentVotesUseCase:
    """Use case for paging through the individual votes on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize list comment votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(
        self, request: ListCommentVotesRequest
    ) -> ListCommentVotesResponse:
        """Execute list comment votes flow.

        Raises:
            NotFoundError: If the comment does not exist or is hidden
            ValidationError: If the system or page request is invalid
        """
        comment_id = parse_comment_id(request.comment_id)
        votes, pagination = await self.vote_service.list_for_comment(
            comment_id,
            request.personality_system,
            page=request.page,
            limit=request.limit,
        )
        return ListCommentVotesResponse(
            comment_id=str(comment_id),
            votes=[VoteItem.from_domain(v) for v in votes],
            pagination=PaginationInfo.from_domain(pagination),
        )
