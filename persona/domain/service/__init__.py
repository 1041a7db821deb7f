"""Domain services."""

from .base import Service
from .comment_ranker import CommentRanker, RankedComments
from .comment_service import CommentOverview, CommentService
from .profile_service import ProfileService, ProfileStats
from .stats_reporter import CommentVoteStats, StatsReporter, SystemDistribution
from .vote_aggregator import VoteAggregator
from .vote_service import VoteService
from .voter_identity import VoterIdentityService, identify

__all__ = [
    "CommentOverview",
    "CommentRanker",
    "CommentService",
    "CommentVoteStats",
    "ProfileService",
    "ProfileStats",
    "RankedComments",
    "Service",
    "StatsReporter",
    "SystemDistribution",
    "VoteAggregator",
    "VoteService",
    "VoterIdentityService",
    "identify",
]
