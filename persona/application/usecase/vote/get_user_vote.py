"""Get user vote use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import VoteItem, parse_comment_id
from persona.domain.error import NotFoundError
from persona.domain.service import VoteService
from persona.domain.value import VoterKey


class GetUserVoteRequest(ApiModel):
    """Get user vote request."""

    comment_id: str
    voter_identifier: str
    personality_system: str


class GetUserVoteResponse(ApiModel):
    """Get user vote response."""

    success: bool = True
    vote: VoteItem


class GetUserVoteUseCase:
    """Use case for looking up the caller's own vote under one system."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: GetUserVoteRequest) -> GetUserVoteResponse:
        comment_id = parse_comment_id(request.comment_id)
        vote = await self.vote_service.find_one(
            comment_id,
            VoterKey(request.voter_identifier),
            request.personality_system,
        )
        if vote is None:
            raise NotFoundError(
                "Vote", f"{comment_id}/{request.personality_system.lower()}"
            )
        return GetUserVoteResponse(vote=VoteItem.from_domain(vote))
