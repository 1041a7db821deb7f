"""Update comment use case."""

from typing import Optional

from pydantic import Field

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem, parse_comment_id
from persona.domain.error import ValidationError
from persona.domain.service import CommentService


class UpdateCommentRequest(ApiModel):
    """Update comment request. Omitted fields are left unchanged."""

    comment_id: str
    content: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    title: Optional[str] = Field(default=None, max_length=200)
    is_visible: Optional[bool] = None


class UpdateCommentResponse(ApiModel):
    success: bool = True
    message: str = "Comment updated successfully"
    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment's text or visibility."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If no field is being changed
            NotFoundError: If the comment does not exist
        """
        comment_id = parse_comment_id(request.comment_id)
        if request.content is None and request.title is None and request.is_visible is None:
            raise ValidationError("body", "At least one field must be provided")

        comment = await self.comment_service.update_comment(
            comment_id,
            content=request.content,
            title=request.title,
            is_visible=request.is_visible,
        )
        return UpdateCommentResponse(comment=CommentItem.from_domain(comment))
