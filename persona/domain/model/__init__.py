"""Domain model entities."""

from persona.domain.model.comment import Comment, TallyUpdate
from persona.domain.model.profile import Profile
from persona.domain.model.vote import Vote, VoteUpsert

__all__ = [
    "Comment",
    "Profile",
    "TallyUpdate",
    "Vote",
    "VoteUpsert",
]
