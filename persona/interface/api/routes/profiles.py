"""Profile routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status

from persona.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from persona.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
    GetProfileRequest,
    GetProfileResponse,
    GetProfileStatsResponse,
    GetProfileStatsUseCase,
    GetProfileUseCase,
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    ProfileChanges,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from persona.domain.value import CommentFilter, CommentSortOrder

router = APIRouter(prefix="/api", tags=["profiles"], route_class=DishkaRoute)


@router.get("/profile", response_model=ListProfilesResponse)
async def list_profiles(
    list_profiles_use_case: FromDishka[ListProfilesUseCase],
    page: Optional[int] = Query(default=None, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
) -> ListProfilesResponse:
    """List profiles.

    Args:
        list_profiles_use_case: List profiles use case from DI
        page: Page number; paginates only together with limit
        limit: Profiles per page; paginates only together with page

    Returns:
        Profiles ordered by ID, with pagination when requested
    """
    return await list_profiles_use_case.execute(
        ListProfilesRequest(page=page, limit=limit)
    )


@router.get("/profile/stats", response_model=GetProfileStatsResponse)
async def profile_stats(
    get_profile_stats_use_case: FromDishka[GetProfileStatsUseCase],
) -> GetProfileStatsResponse:
    """Profile count and MBTI distribution."""
    return await get_profile_stats_use_case.execute()


@router.get("/profile/{profile_id}", response_model=GetProfileResponse)
async def get_profile(
    profile_id: int,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    return await get_profile_use_case.execute(GetProfileRequest(profile_id=profile_id))


@router.post(
    "/profile",
    response_model=CreateProfileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_profile(
    request: CreateProfileRequest,
    create_profile_use_case: FromDishka[CreateProfileUseCase],
) -> CreateProfileResponse:
    """Create a profile.

    Args:
        request: Profile data, including its ID
        create_profile_use_case: Create profile use case from DI

    Returns:
        Created profile

    Raises:
        DuplicateProfileError: If the ID is taken (409)
    """
    return await create_profile_use_case.execute(request)


@router.put("/profile/{profile_id}", response_model=UpdateProfileResponse)
async def update_profile(
    profile_id: int,
    request: ProfileChanges,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> UpdateProfileResponse:
    """Update some or all of a profile's fields."""
    return await update_profile_use_case.execute(
        UpdateProfileRequest(profile_id=profile_id, changes=request)
    )


@router.delete("/profile/{profile_id}", response_model=DeleteProfileResponse)
async def delete_profile(
    profile_id: int,
    delete_profile_use_case: FromDishka[DeleteProfileUseCase],
) -> DeleteProfileResponse:
    return await delete_profile_use_case.execute(
        DeleteProfileRequest(profile_id=profile_id)
    )


@router.get("/profiles/{profile_id}/comments", response_model=ListCommentsResponse)
async def list_profile_comments(
    profile_id: int,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: int = Query(default=1),
    limit: Optional[int] = Query(default=None),
    sort: CommentSortOrder = Query(default=CommentSortOrder.RECENT),
    filter: CommentFilter = Query(default=CommentFilter.ALL),
) -> ListCommentsResponse:
    """Ranked comments on one profile.

    Args:
        profile_id: Profile ID
        list_comments_use_case: List comments use case from DI
        page: 1-based page number
        limit: Comments per page
        sort: recent, oldest or best
        filter: all, or a personality system the comment must have votes under

    Returns:
        Comments on the page, pagination and the applied filters
    """
    return await list_comments_use_case.execute(
        ListCommentsRequest(
            profile_id=profile_id, page=page, limit=limit, sort=sort, filter=filter
        )
    )


@router.get(
    "/profiles/{profile_id}/comments/count", response_model=CountCommentsResponse
)
async def count_profile_comments(
    profile_id: int,
    count_comments_use_case: FromDishka[CountCommentsUseCase],
) -> CountCommentsResponse:
    return await count_comments_use_case.execute(
        CountCommentsRequest(profile_id=profile_id)
    )
