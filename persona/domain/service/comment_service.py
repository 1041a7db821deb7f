"""Comment domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import Field

from persona.domain.error import NotFoundError
from persona.domain.model import Comment
from persona.domain.model.common import DomainModel
from persona.domain.repository import CommentRepository, ProfileRepository
from persona.domain.value import CommentId, CommentSortOrder, ProfileId

from .base import Service


class CommentOverview(DomainModel):
    """Corpus-wide comment statistics."""

    total_comments: int
    top_comments: list[Comment] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            profile_repository: Profile repository
        """
        self.comment_repository = comment_repository
        self.profile_repository = profile_repository

    async def create_comment(
        self,
        profile_id: ProfileId,
        content: str,
        author: str,
        title: Optional[str] = None,
    ) -> Comment:
        """Create a comment on a profile.

        Args:
            profile_id: Profile being commented on
            content: Comment body
            author: Display name of the commenter
            title: Optional title

        Returns:
            Created comment with an empty vote tally

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span(
            "comment_service.create_comment", profile_id=profile_id, author=author
        ):
            if not await self.profile_repository.exists(profile_id):
                logfire.warn("Comment on non-existent profile", profile_id=profile_id)
                raise NotFoundError("Profile", str(profile_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                profile_id=profile_id,
                content=content.strip(),
                title=title.strip() if title else None,
                author=author.strip(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), profile_id=profile_id
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a visible comment.

        Raises:
            NotFoundError: If the comment does not exist or is hidden
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or not comment.is_visible:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def update_comment(
        self,
        comment_id: CommentId,
        content: Optional[str] = None,
        title: Optional[str] = None,
        is_visible: Optional[bool] = None,
    ) -> Comment:
        """Edit a comment's text or visibility.

        Hidden comments can be edited too, which is how a soft-deleted
        comment is restored.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.update_comment", comment_id=str(comment_id)):
            updated = await self.comment_repository.update_content(
                comment_id,
                content=content.strip() if content is not None else None,
                title=title.strip() if title is not None else None,
                is_visible=is_visible,
            )
            if updated is None:
                logfire.warn("Update of non-existent comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId) -> Comment:
        """Soft-delete a comment by hiding it.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.update_content(
                comment_id, is_visible=False
            )
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment hidden", comment_id=str(comment_id))
            return deleted

    async def count_comments(self, profile_id: Optional[ProfileId] = None) -> int:
        """Count visible comments, optionally for one profile."""
        return await self.comment_repository.count(profile_id=profile_id)

    async def get_overview(self, top_limit: int = 10) -> CommentOverview:
        """Total comment count and the most-voted comments."""
        return CommentOverview(
            total_comments=await self.comment_repository.count(),
            top_comments=await self.comment_repository.find_all(
                sort=CommentSortOrder.BEST, limit=top_limit
            ),
        )
