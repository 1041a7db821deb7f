"""Create comment use case."""

from typing import Optional

from pydantic import Field

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem
from persona.domain.service import CommentService
from persona.domain.value import MAX_PROFILE_ID, MIN_PROFILE_ID, ProfileId


class CreateCommentRequest(ApiModel):
    """Create comment request."""

    profile_id: int = Field(ge=MIN_PROFILE_ID, le=MAX_PROFILE_ID)
    content: str = Field(min_length=1, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=200)
    author: str = Field(min_length=1, max_length=100)


class CreateCommentResponse(ApiModel):
    """Create comment response."""

    success: bool = True
    message: str = "Comment created successfully"
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for posting a comment on a profile."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the profile does not exist
        """
        comment = await self.comment_service.create_comment(
            profile_id=ProfileId(request.profile_id),
            content=request.content,
            author=request.author,
            title=request.title,
        )
        return CreateCommentResponse(comment=CommentItem.from_domain(comment))
