"""Comment ranking domain service."""

from typing import Optional

import logfire
from pydantic import Field

from persona.config import PaginationSettings
from persona.domain.model import Comment
from persona.domain.model.common import DomainModel
from persona.domain.repository import CommentRepository
from persona.domain.value import (
    CommentFilter,
    CommentSortOrder,
    Pagination,
    ProfileId,
    check_page_request,
)

from .base import Service


class RankedComments(DomainModel):
    """One page of a ranked comment listing."""

    comments: list[Comment] = Field(default_factory=list)
    pagination: Pagination
    sort: CommentSortOrder
    filter: CommentFilter


class CommentRanker(Service):
    """Sorted, filtered and paginated comment listings.

    Rankings read the denormalized tallies stored on each comment:
    - recent: newest first
    - oldest: oldest first
    - best: most votes first; equally voted comments newest first
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize comment ranker.

        Args:
            comment_repository: Comment repository
            pagination_settings: Page size limits
        """
        self.comment_repository = comment_repository
        self.pagination_settings = pagination_settings

    async def list_comments(
        self,
        filter: CommentFilter = CommentFilter.ALL,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
        page: int = 1,
        page_size: Optional[int] = None,
        profile_id: Optional[ProfileId] = None,
    ) -> RankedComments:
        """List visible comments.

        A page past the end is not an error: it comes back empty, with
        pagination still describing the true totals.

        Args:
            filter: Restrict to comments carrying votes under one system
            sort: Sort order
            page: 1-based page number
            page_size: Comments per page (defaults to the configured size)
            profile_id: Restrict to one profile's comments

        Returns:
            Comments on the page with pagination metadata

        Raises:
            ValidationError: If page or page_size is out of range
        """
        if page_size is None:
            page_size = self.pagination_settings.default_limit
        check_page_request(page, page_size, self.pagination_settings.max_limit)
        system = filter.personality_system

        with logfire.span(
            "comment_ranker.list_comments",
            filter=filter.value,
            sort=sort.value,
            page=page,
            page_size=page_size,
            profile_id=profile_id,
        ):
            total_count = await self.comment_repository.count(
                profile_id=profile_id, personality_system=system
            )
            pagination = Pagination.from_totals(page, page_size, total_count)

            comments: list[Comment] = []
            if pagination.offset < total_count:
                comments = await self.comment_repository.find_all(
                    profile_id=profile_id,
                    personality_system=system,
                    sort=sort,
                    limit=page_size,
                    offset=pagination.offset,
                )

            return RankedComments(
                comments=comments, pagination=pagination, sort=sort, filter=filter
            )
