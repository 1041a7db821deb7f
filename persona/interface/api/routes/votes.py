"""Vote routes that are not scoped to a single comment."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import Field

from persona.application.usecase.base import ApiModel
from persona.application.usecase.stats import (
    GetPersonalityStatsRequest,
    GetPersonalityStatsResponse,
    GetPersonalityStatsUseCase,
    GetTopCommentsRequest,
    GetTopCommentsResponse,
    GetTopCommentsUseCase,
    GetVoteCountRequest,
    GetVoteCountResponse,
    GetVoteCountUseCase,
)
from persona.application.usecase.vote import (
    BulkSubmitVotesRequest,
    BulkSubmitVotesResponse,
    BulkSubmitVotesUseCase,
    BulkVoteItem,
    GetVoteHistoryRequest,
    GetVoteHistoryResponse,
    GetVoteHistoryUseCase,
)
from persona.domain.service import VoterIdentityService
from persona.domain.value import PERSONALITY_VALUES
from persona.interface.api.voter import voter_key

router = APIRouter(prefix="/api/votes", tags=["votes"], route_class=DishkaRoute)


class PersonalityValuesResponse(ApiModel):
    success: bool = True
    personality_values: dict[str, list[str]]


@router.get("/personality-values", response_model=PersonalityValuesResponse)
async def personality_values() -> PersonalityValuesResponse:
    """Accepted values for each personality system, in canonical spelling."""
    return PersonalityValuesResponse(
        personality_values={
            system.value: list(values) for system, values in PERSONALITY_VALUES.items()
        }
    )


@router.get("/history", response_model=GetVoteHistoryResponse)
async def vote_history(
    http_request: Request,
    get_vote_history_use_case: FromDishka[GetVoteHistoryUseCase],
    voter_identity: FromDishka[VoterIdentityService],
    personality_system: Optional[str] = Query(default=None, alias="personalitySystem"),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
) -> GetVoteHistoryResponse:
    """The caller's votes across all comments, newest first."""
    return await get_vote_history_use_case.execute(
        GetVoteHistoryRequest(
            voter_identifier=voter_key(http_request, voter_identity).root,
            personality_system=personality_system,
            page=page,
            limit=limit,
        )
    )


@router.get("/top-comments", response_model=GetTopCommentsResponse)
async def top_comments(
    get_top_comments_use_case: FromDishka[GetTopCommentsUseCase],
    personality_system: Optional[str] = Query(default=None, alias="personalitySystem"),
    limit: Optional[int] = Query(default=None),
) -> GetTopCommentsResponse:
    """Most-voted comments, optionally among those voted under one system."""
    return await get_top_comments_use_case.execute(
        GetTopCommentsRequest(personality_system=personality_system, limit=limit)
    )


@router.get("/stats", response_model=GetPersonalityStatsResponse)
async def personality_stats(
    get_personality_stats_use_case: FromDishka[GetPersonalityStatsUseCase],
    comment_id: Optional[str] = Query(default=None, alias="commentId"),
) -> GetPersonalityStatsResponse:
    """Per-system vote distributions, global or for one comment."""
    return await get_personality_stats_use_case.execute(
        GetPersonalityStatsRequest(comment_id=comment_id)
    )


@router.get("/count", response_model=GetVoteCountResponse)
async def vote_count(
    get_vote_count_use_case: FromDishka[GetVoteCountUseCase],
    comment_id: Optional[str] = Query(default=None, alias="commentId"),
    personality_system: Optional[str] = Query(default=None, alias="personalitySystem"),
) -> GetVoteCountResponse:
    return await get_vote_count_use_case.execute(
        GetVoteCountRequest(comment_id=comment_id, personality_system=personality_system)
    )


class BulkSubmitVotesAPIRequest(ApiModel):
    """API request for submitting several votes at once."""

    votes: list[BulkVoteItem] = Field(min_length=1)


@router.post("/bulk", response_model=BulkSubmitVotesResponse)
async def bulk_submit_votes(
    request: BulkSubmitVotesAPIRequest,
    http_request: Request,
    bulk_submit_votes_use_case: FromDishka[BulkSubmitVotesUseCase],
    voter_identity: FromDishka[VoterIdentityService],
) -> BulkSubmitVotesResponse:
    """Submit several votes; each succeeds or fails on its own.

    Args:
        request: Votes to submit
        http_request: Incoming request, for voter identity
        bulk_submit_votes_use_case: Bulk vote use case from DI
        voter_identity: Voter identity service from DI

    Returns:
        Per-vote results and errors with a summary
    """
    return await bulk_submit_votes_use_case.execute(
        BulkSubmitVotesRequest(
            voter_identifier=voter_key(http_request, voter_identity).root,
            votes=request.votes,
        )
    )
