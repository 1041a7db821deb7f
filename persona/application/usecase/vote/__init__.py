"""Vote use cases."""

from .bulk_submit_votes import (
    BulkSubmitVotesRequest,
    BulkSubmitVotesResponse,
    BulkSubmitVotesUseCase,
    BulkVoteItem,
)
from .get_user_vote import GetUserVoteRequest, GetUserVoteResponse, GetUserVoteUseCase
from .get_vote_history import (
    GetVoteHistoryRequest,
    GetVoteHistoryResponse,
    GetVoteHistoryUseCase,
)
from .list_comment_votes import (
    ListCommentVotesRequest,
    ListCommentVotesResponse,
    ListCommentVotesUseCase,
)
from .remove_vote import RemoveVoteRequest, RemoveVoteResponse, RemoveVoteUseCase
from .submit_vote import SubmitVoteRequest, SubmitVoteResponse, SubmitVoteUseCase

__all__ = [
    "BulkSubmitVotesRequest",
    "BulkSubmitVotesResponse",
    "BulkSubmitVotesUseCase",
    "BulkVoteItem",
    "GetUserVoteRequest",
    "GetUserVoteResponse",
    "GetUserVoteUseCase",
    "GetVoteHistoryRequest",
    "GetVoteHistoryResponse",
    "GetVoteHistoryUseCase",
    "ListCommentVotesRequest",
    "ListCommentVotesResponse",
    "ListCommentVotesUseCase",
    "RemoveVoteRequest",
    "RemoveVoteResponse",
    "RemoveVoteUseCase",
    "SubmitVoteRequest",
    "SubmitVoteResponse",
    "SubmitVoteUseCase",
]
