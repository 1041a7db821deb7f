"""Delete comment use case."""

from persona.application.usecase.base import ApiModel
from persona.application.usecase.common import parse_comment_id
from persona.domain.service import CommentService


class DeleteCommentRequest(ApiModel):
    comment_id: str


class DeleteCommentResponse(ApiModel):
    success: bool = True
    message: str = "Comment deleted successfully"


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment.

    The comment is hidden from listings and stats but its votes and tally
    are kept, so restoring it via update brings them back.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        await self.comment_service.delete_comment(parse_comment_id(request.comment_id))
        return DeleteCommentResponse()
