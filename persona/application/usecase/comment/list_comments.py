"""List comments use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem, PaginationInfo
from persona.domain.service import CommentRanker
from persona.domain.value import CommentFilter, CommentSortOrder, ProfileId


class ListCommentsRequest(ApiModel):
    """List comments request."""

    profile_id: Optional[int] = None
    page: int = 1
    limit: Optional[int] = None
    sort: CommentSortOrder = CommentSortOrder.RECENT
    filter: CommentFilter = CommentFilter.ALL


class CommentListFilters(ApiModel):
    sort: CommentSortOrder
    filter: CommentFilter


class ListCommentsResponse(ApiModel):
    """List comments response."""

    success: bool = True
    profile_id: Optional[int] = None
    comments: list[CommentItem]
    pagination: PaginationInfo
    filters: CommentListFilters


class ListCommentsUseCase:
    """Use case for ranked comment listings, corpus-wide or per profile."""

    def __init__(self, comment_ranker: CommentRanker) -> None:
        """Initialize list comments use case.

        Args:
            comment_ranker: Comment ranker domain service
        """
        self.comment_ranker = comment_ranker

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        ranked = await self.comment_ranker.list_comments(
            filter=request.filter,
            sort=request.sort,
            page=request.page,
            page_size=request.limit,
            profile_id=(
                ProfileId(request.profile_id)
                if request.profile_id is not None
                else None
            ),
        )
        return ListCommentsResponse(
            profile_id=request.profile_id,
            comments=[CommentItem.from_domain(c) for c in ranked.comments],
            pagination=PaginationInfo.from_domain(ranked.pagination),
            filters=CommentListFilters(sort=ranked.sort, filter=ranked.filter),
        )
