"""Domain repository interfaces."""

from persona.domain.repository.comment import CommentRepository
from persona.domain.repository.profile import ProfileRepository
from persona.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ProfileRepository",
    "VoteRepository",
]
