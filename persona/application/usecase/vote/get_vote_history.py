"""Get vote history use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import PaginationInfo, VoteItem
from persona.domain.model import Comment, Vote
from persona.domain.repository import CommentRepository
from persona.domain.service import VoteService
from persona.domain.value import VoterKey


class VotedCommentSummary(ApiModel):
    """Short description of the comment a vote was cast on."""

    id: str
    profile_id: int
    title: Optional[str]
    content: str
    author: str


class VoteHistoryItem(VoteItem):
    """Vote in a voter's history, with the comment it targets."""

    comment: Optional[VotedCommentSummary] = None

    @classmethod
    def from_vote(cls, vote: Vote, comment: Comment | None) -> "VoteHistoryItem":
        summary = None
        if comment is not None:
            summary = VotedCommentSummary(
                id=str(comment.id),
                profile_id=comment.profile_id,
                title=comment.title,
                content=comment.content,
                author=comment.author,
            )
        return cls(**VoteItem.from_domain(vote).model_dump(), comment=summary)


class GetVoteHistoryRequest(ApiModel):
    """Get vote history request."""

    voter_identifier: str
    personality_system: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None


class GetVoteHistoryResponse(ApiModel):
    """Get vote history response."""

    success: bool = True
    votes: list[VoteHistoryItem]
    pagination: PaginationInfo


class GetVoteHistoryUseCase:
    """Use case for listing the caller's votes across all comments."""

    def __init__(
        self, vote_service: VoteService, comment_repository: CommentRepository
    ) -> None:
        """Initialize get vote history use case.

        Args:
            vote_service: Vote domain service
            comment_repository: Comment repository for batch comment lookup
        """
        self.vote_service = vote_service
        self.comment_repository = comment_repository

    async def execute(self, request: GetVoteHistoryRequest) -> GetVoteHistoryResponse:
        """Execute get vote history flow.

        Comments are fetched in one batch query for the whole page.
        """
        votes, pagination = await self.vote_service.history(
            VoterKey(request.voter_identifier),
            request.personality_system,
            page=request.page,
            limit=request.limit,
        )

        comments = await self.comment_repository.find_by_ids(
            list({v.comment_id for v in votes})
        )
        comments_by_id = {c.id: c for c in comments}

        return GetVoteHistoryResponse(
            votes=[
                VoteHistoryItem.from_vote(v, comments_by_id.get(v.comment_id))
                for v in votes
            ],
            pagination=PaginationInfo.from_domain(pagination),
        )
