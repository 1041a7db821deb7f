"""Remove vote use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import VoteItem, parse_comment_id
from persona.domain.error import NotFoundError
from persona.domain.service import VoteService
from persona.domain.value import VoterKey


class RemoveVoteRequest(ApiModel):
    """Remove vote request."""

    comment_id: str  # UUID string
    voter_identifier: str
    personality_system: str


class RemoveVoteResponse(ApiModel):
    """Remove vote response."""

    success: bool = True
    message: str = "Vote removed successfully"
    vote: VoteItem


class RemoveVoteUseCase:
    """Use case for removing a voter's vote under one personality system."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Raises:
            NotFoundError: If the voter has no such vote
        """
        comment_id = parse_comment_id(request.comment_id)
        removed = await self.vote_service.remove(
            comment_id,
            VoterKey(request.voter_identifier),
            request.personality_system,
        )
        if removed is None:
            raise NotFoundError(
                "Vote", f"{comment_id}/{request.personality_system.lower()}"
            )
        return RemoveVoteResponse(vote=VoteItem.from_domain(removed))
