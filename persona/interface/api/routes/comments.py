"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request, Response, status
from pydantic import BaseModel, Field

from persona.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentStatsResponse,
    GetCommentStatsUseCase,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from persona.application.usecase.stats import (
    GetCommentVoteStatsRequest,
    GetCommentVoteStatsResponse,
    GetCommentVoteStatsUseCase,
)
from persona.application.usecase.vote import (
    GetUserVoteRequest,
    GetUserVoteResponse,
    GetUserVoteUseCase,
    ListCommentVotesRequest,
    ListCommentVotesResponse,
    ListCommentVotesUseCase,
    RemoveVoteRequest,
    RemoveVoteResponse,
    RemoveVoteUseCase,
    SubmitVoteRequest,
    SubmitVoteResponse,
    SubmitVoteUseCase,
)
from persona.application.usecase.base import ApiModel
from persona.domain.service import VoterIdentityService
from persona.domain.value import CommentFilter, CommentSortOrder
from persona.interface.api.voter import voter_key

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


@router.post("", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Post a comment on a profile.

    Args:
        request: Comment data
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment with an empty tally
    """
    return await create_comment_use_case.execute(request)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1),
    limit: Optional[int] = Query(default=None),
    sort: CommentSortOrder = Query(default=CommentSortOrder.RECENT),
    filter: CommentFilter = Query(default=CommentFilter.ALL),
) -> ListCommentsResponse:
    """Ranked comments across all profiles."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(page=page, limit=limit, sort=sort, filter=filter)
    )


@router.get("/count", response_model=CountCommentsResponse)
async def count_comments(
    count_comments_use_case: FromDishka[CountCommentsUseCase],
) -> CountCommentsResponse:
    return await count_comments_use_case.execute(CountCommentsRequest())


@router.get("/stats", response_model=GetCommentStatsResponse)
async def comment_stats(
    get_comment_stats_use_case: FromDishka[GetCommentStatsUseCase],
) -> GetCommentStatsResponse:
    """Total comments and the ten most-voted comments."""
    return await get_comment_stats_use_case.execute()


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


class UpdateCommentAPIRequest(ApiModel):
    """API request for updating a comment."""

    content: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=200)
    is_visible: Optional[bool] = None


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Edit a comment. Vote tallies are never changed here."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            content=request.content,
            title=request.title,
            is_visible=request.is_visible,
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft-delete a comment."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id)
    )


class SubmitVoteAPIRequest(ApiModel):
    """API request for casting a vote."""

    personality_system: str
    personality_value: str
    profile_id: Optional[int] = Field(default=None, ge=1, le=99999)


@router.post("/{comment_id}/vote", response_model=SubmitVoteResponse)
async def submit_vote(
    comment_id: str,
    request: SubmitVoteAPIRequest,
    http_request: Request,
    response: Response,
    submit_vote_use_case: FromDishka[SubmitVoteUseCase],
    voter_identity: FromDishka[VoterIdentityService],
) -> SubmitVoteResponse:
    """Cast or change a personality vote on a comment.

    The voter is identified from the connection, not from the body.

    Args:
        comment_id: Comment UUID
        request: Personality system and value
        http_request: Incoming request, for voter identity
        response: Outgoing response, for the status code
        submit_vote_use_case: Submit vote use case from DI
        voter_identity: Voter identity service from DI

    Returns:
        The stored vote: 201 for a first vote, 200 when one existed
    """
    result = await submit_vote_use_case.execute(
        SubmitVoteRequest(
            comment_id=comment_id,
            voter_identifier=voter_key(http_request, voter_identity).root,
            personality_system=request.personality_system,
            personality_value=request.personality_value,
            profile_id=request.profile_id,
        )
    )
    response.status_code = status.HTTP_200_OK if result.is_update else status.HTTP_201_CREATED
    return result


@router.get("/{comment_id}/votes", response_model=ListCommentVotesResponse)
async def list_comment_votes(
    comment_id: str,
    list_comment_votes_use_case: FromDishka[ListCommentVotesUseCase],
    personality_system: Optional[str] = Query(default=None, alias="personalitySystem"),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
) -> ListCommentVotesResponse:
    """Individual votes on a comment, newest first."""
    return await list_comment_votes_use_case.execute(
        ListCommentVotesRequest(
            comment_id=comment_id,
            personality_system=personality_system,
            page=page,
            limit=limit,
        )
    )


@router.get("/{comment_id}/votes/stats", response_model=GetCommentVoteStatsResponse)
async def comment_vote_stats(
    comment_id: str,
    get_comment_vote_stats_use_case: FromDishka[GetCommentVoteStatsUseCase],
) -> GetCommentVoteStatsResponse:
    """Vote tally for one comment."""
    return await get_comment_vote_stats_use_case.execute(
        GetCommentVoteStatsRequest(comment_id=comment_id)
    )


@router.get(
    "/{comment_id}/votes/{personality_system}", response_model=GetUserVoteResponse
)
async def get_user_vote(
    comment_id: str,
    personality_system: str,
    http_request: Request,
    get_user_vote_use_case: FromDishka[GetUserVoteUseCase],
    voter_identity: FromDishka[VoterIdentityService],
) -> GetUserVoteResponse:
    """The caller's own vote under one system."""
    return await get_user_vote_use_case.execute(
        GetUserVoteRequest(
            comment_id=comment_id,
            voter_identifier=voter_key(http_request, voter_identity).root,
            personality_system=personality_system,
        )
    )


@router.delete(
    "/{comment_id}/votes/{personality_system}", response_model=RemoveVoteResponse
)
async def remove_vote(
    comment_id: str,
    personality_system: str,
    http_request: Request,
    remove_vote_use_case: FromDishka[RemoveVoteUseCase],
    voter_identity: FromDishka[VoterIdentityService],
) -> RemoveVoteResponse:
    """Remove the caller's vote under one system.

    Raises:
        NotFoundError: If the caller has no such vote (404)
    """
    return await remove_vote_use_case.execute(
        RemoveVoteRequest(
            comment_id=comment_id,
            voter_identifier=voter_key(http_request, voter_identity).root,
            personality_system=personality_system,
        )
    )
