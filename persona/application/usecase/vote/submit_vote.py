"""Submit vote use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import VoteItem, parse_comment_id
from persona.domain.service import VoteService
from persona.domain.value import ProfileId, VoterKey


class SubmitVoteRequest(ApiModel):
    """Submit vote request."""

    comment_id: str  # UUID string
    voter_identifier: str  # Derived from the connection, never client-supplied
    personality_system: str
    personality_value: str
    profile_id: Optional[int] = None


class SubmitVoteResponse(ApiModel):
    """Submit vote response."""

    success: bool = True
    message: str
    vote: VoteItem
    is_update: bool


class SubmitVoteUseCase:
    """Use case for casting or changing a personality vote on a comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize submit vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: SubmitVoteRequest) -> SubmitVoteResponse:
        """Execute submit vote flow.

        Args:
            request: Submit vote request

        Returns:
            Stored vote; is_update is True whenever the voter already had a
            vote under this system, including an identical resubmission

        Raises:
            ValidationError: If the comment ID, system or value is invalid
            NotFoundError: If the comment does not exist or is hidden
        """
        outcome = await self.vote_service.submit(
            comment_id=parse_comment_id(request.comment_id),
            voter_key=VoterKey(request.voter_identifier),
            personality_system=request.personality_system,
            personality_value=request.personality_value,
            profile_id=ProfileId(request.profile_id) if request.profile_id else None,
        )

        if outcome.is_new_vote:
            message = "Vote submitted successfully"
        elif outcome.is_unchanged:
            message = "Vote unchanged"
        else:
            message = "Vote updated successfully"

        return SubmitVoteResponse(
            message=message,
            vote=VoteItem.from_domain(outcome.vote),
            is_update=not outcome.is_new_vote,
        )
