"""Bulk submit votes use case."""

from typing import Optional

import logfire
from pydantic import Field

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import VoteItem, parse_comment_id
from persona.config import PaginationSettings
from persona.domain.error import DomainError, ValidationError
from persona.domain.service import VoteService
from persona.domain.value import ProfileId, VoterKey


class BulkVoteItem(ApiModel):
    """One vote in a bulk submission."""

    comment_id: str
    personality_system: str
    personality_value: str
    profile_id: Optional[int] = Field(default=None, ge=1, le=99999)


class BulkSubmitVotesRequest(ApiModel):
    """Bulk submit votes request."""

    voter_identifier: str
    votes: list[BulkVoteItem]


class BulkVoteResult(ApiModel):
    """Outcome of one accepted vote."""

    index: int
    comment_id: str
    personality_system: str
    is_update: bool
    vote: VoteItem


class BulkVoteFailure(ApiModel):
    """Outcome of one rejected vote."""

    index: int
    comment_id: str
    personality_system: str
    error: str


class BulkVoteSummary(ApiModel):
    total: int
    successful: int
    failed: int


class BulkSubmitVotesResponse(ApiModel):
    """Bulk submit votes response."""

    success: bool = True
    results: list[BulkVoteResult]
    errors: list[BulkVoteFailure]
    summary: BulkVoteSummary


class BulkSubmitVotesUseCase:
    """Use case for submitting several votes at once.

    Each vote is processed independently: a vote rejected for bad input
    or a missing comment is reported in ``errors`` and the rest proceed.
    """

    def __init__(
        self, vote_service: VoteService, pagination_settings: PaginationSettings
    ) -> None:
        """Initialize bulk submit votes use case.

        Args:
            vote_service: Vote domain service
            pagination_settings: Holds the bulk size limit
        """
        self.vote_service = vote_service
        self.pagination_settings = pagination_settings

    async def execute(
        self, request: BulkSubmitVotesRequest
    ) -> BulkSubmitVotesResponse:
        """Execute bulk vote flow, in request order.

        Raises:
            ValidationError: If the batch is empty or too large
        """
        max_votes = self.pagination_settings.max_bulk_votes
        if not 1 <= len(request.votes) <= max_votes:
            raise ValidationError(
                "votes", f"Between 1 and {max_votes} votes must be submitted"
            )

        voter_key = VoterKey(request.voter_identifier)
        results: list[BulkVoteResult] = []
        errors: list[BulkVoteFailure] = []

        with logfire.span("bulk_submit_votes", count=len(request.votes)):
            for index, item in enumerate(request.votes):
                try:
                    outcome = await self.vote_service.submit(
                        comment_id=parse_comment_id(item.comment_id),
                        voter_key=voter_key,
                        personality_system=item.personality_system,
                        personality_value=item.personality_value,
                        profile_id=ProfileId(item.profile_id) if item.profile_id else None,
                    )
                except DomainError as e:
                    errors.append(
                        BulkVoteFailure(
                            index=index,
                            comment_id=item.comment_id,
                            personality_system=item.personality_system,
                            error=str(e),
                        )
                    )
                    continue

                results.append(
                    BulkVoteResult(
                        index=index,
                        comment_id=item.comment_id,
                        personality_system=outcome.vote.personality_system.value,
                        is_update=not outcome.is_new_vote,
                        vote=VoteItem.from_domain(outcome.vote),
                    )
                )

            logfire.info(
                "Bulk votes processed",
                total=len(request.votes),
                successful=len(results),
                failed=len(errors),
            )

        return BulkSubmitVotesResponse(
            results=results,
            errors=errors,
            summary=BulkVoteSummary(
                total=len(request.votes),
                successful=len(results),
                failed=len(errors),
            ),
        )
