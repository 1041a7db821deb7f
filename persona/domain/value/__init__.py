"""Domain value objects."""

from .identifiers import (
    MAX_PROFILE_ID,
    MIN_PROFILE_ID,
    CommentId,
    ProfileId,
    VoteId,
)
from .personality import (
    PERSONALITY_VALUES,
    PersonalitySystem,
    VoteDelta,
    VoteStats,
    empty_vote_stats,
    normalize_personality_value,
)
from .types import (
    CommentFilter,
    CommentSortOrder,
    Pagination,
    VoterKey,
    VoterMetadata,
    check_page_request,
)

__all__ = [
    "MAX_PROFILE_ID",
    "MIN_PROFILE_ID",
    "CommentId",
    "ProfileId",
    "VoteId",
    "PERSONALITY_VALUES",
    "PersonalitySystem",
    "VoteDelta",
    "VoteStats",
    "empty_vote_stats",
    "normalize_personality_value",
    "CommentFilter",
    "CommentSortOrder",
    "Pagination",
    "VoterKey",
    "VoterMetadata",
    "check_page_request",
]
