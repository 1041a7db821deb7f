"""Get comment use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import CommentItem, parse_comment_id
from persona.domain.service import CommentService


class GetCommentRequest(ApiModel):
    comment_id: str


class GetCommentResponse(ApiModel):
    success: bool = True
    comment: CommentItem


class GetCommentUseCase:
    """Use case for reading a single visible comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        comment = await self.comment_service.get_comment(
            parse_comment_id(request.comment_id)
        )
        return GetCommentResponse(comment=CommentItem.from_domain(comment))
