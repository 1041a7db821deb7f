"""Domain layer DI providers."""

from dishka import Scope, provide

from persona.config import PaginationSettings, VotingSettings
from persona.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VoteRepository,
)
from persona.domain.service import (
    CommentRanker,
    CommentService,
    ProfileService,
    StatsReporter,
    VoteAggregator,
    VoterIdentityService,
    VoteService,
)
from persona.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_voter_identity_service(
        self, voting_settings: VotingSettings
    ) -> VoterIdentityService:
        """Provide voter identity derivation."""
        return VoterIdentityService(voting_settings=voting_settings)

    @provide
    def get_vote_aggregator(
        self, comment_repository: CommentRepository
    ) -> VoteAggregator:
        """Provide the comment tally aggregator."""
        return VoteAggregator(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
        vote_aggregator: VoteAggregator,
        voting_settings: VotingSettings,
        pagination_settings: PaginationSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
            vote_aggregator=vote_aggregator,
            voting_settings=voting_settings,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_comment_ranker(
        self,
        comment_repository: CommentRepository,
        pagination_settings: PaginationSettings,
    ) -> CommentRanker:
        """Provide comment ranking service."""
        return CommentRanker(
            comment_repository=comment_repository,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_stats_reporter(
        self,
        comment_repository: CommentRepository,
        pagination_settings: PaginationSettings,
    ) -> StatsReporter:
        """Provide vote statistics service."""
        return StatsReporter(
            comment_repository=comment_repository,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        profile_repository: ProfileRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            profile_repository=profile_repository,
        )

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        pagination_settings: PaginationSettings,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            pagination_settings=pagination_settings,
        )
