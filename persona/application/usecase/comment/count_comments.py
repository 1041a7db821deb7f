"""Count comments use case."""

from typing import Optional

from persona.application.usecase.base import ApiModel
from persona.domain.service import CommentService
from persona.domain.value import ProfileId


class CountCommentsRequest(ApiModel):
    profile_id: Optional[int] = None


class CountCommentsResponse(ApiModel):
    success: bool = True
    count: int
    profile_id: Optional[int] = None


class CountCommentsUseCase:
    """Use case for counting visible comments."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        profile_id = (
            ProfileId(request.profile_id) if request.profile_id is not None else None
        )
        count = await self.comment_service.count_comments(profile_id)
        return CountCommentsResponse(count=count, profile_id=request.profile_id)
