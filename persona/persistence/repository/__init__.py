"""PostgreSQL repository implementations."""

from persona.persistence.repository.comment import PostgresCommentRepository
from persona.persistence.repository.profile import PostgresProfileRepository
from persona.persistence.repository.vote import PostgresVoteRepository

# Re-export domain interfaces for convenience
from persona.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
)

__all__ = [
    "CommentRepository",
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresVoteRepository",
    "ProfileRepository",
    "VoteRepository",
]
