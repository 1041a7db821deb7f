"""Vote statistics use cases."""

from .get_comment_vote_stats import (
    GetCommentVoteStatsRequest,
    GetCommentVoteStatsResponse,
    GetCommentVoteStatsUseCase,
)
from .get_personality_stats import (
    GetPersonalityStatsRequest,
    GetPersonalityStatsResponse,
    GetPersonalityStatsUseCase,
)
from .get_top_comments import (
    GetTopCommentsRequest,
    GetTopCommentsResponse,
    GetTopCommentsUseCase,
)
from .get_vote_count import GetVoteCountRequest, GetVoteCountResponse, GetVoteCountUseCase

__all__ = [
    "GetCommentVoteStatsRequest",
    "GetCommentVoteStatsResponse",
    "GetCommentVoteStatsUseCase",
    "GetPersonalityStatsRequest",
    "GetPersonalityStatsResponse",
    "GetPersonalityStatsUseCase",
    "GetTopCommentsRequest",
    "GetTopCommentsResponse",
    "GetTopCommentsUseCase",
    "GetVoteCountRequest",
    "GetVoteCountResponse",
    "GetVoteCountUseCase",
]
