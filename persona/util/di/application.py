"""Application layer DI providers."""

from dishka import Scope, provide

from persona.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentStatsUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from persona.application.usecase.profile import (
    CreateProfileUseCase,
    DeleteProfileUseCase,
    GetProfileStatsUseCase,
    GetProfileUseCase,
    ListProfilesUseCase,
    UpdateProfileUseCase,
)
from persona.application.usecase.stats import (
    GetCommentVoteStatsUseCase,
    GetPersonalityStatsUseCase,
    GetTopCommentsUseCase,
    GetVoteCountUseCase,
)
from persona.application.usecase.vote import (
    BulkSubmitVotesUseCase,
    GetUserVoteUseCase,
    GetVoteHistoryUseCase,
    ListCommentVotesUseCase,
    RemoveVoteUseCase,
    SubmitVoteUseCase,
)
from persona.config import PaginationSettings
from persona.domain.repository import CommentRepository
from persona.domain.service import (
    CommentRanker,
    CommentService,
    ProfileService,
    StatsReporter,
    VoteService,
)
from persona.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_submit_vote_use_case(self, vote_service: VoteService) -> SubmitVoteUseCase:
        """Provide submit vote use case."""
        return SubmitVoteUseCase(vote_service=vote_service)

    @provide
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide
    def get_user_vote_use_case(self, vote_service: VoteService) -> GetUserVoteUseCase:
        return GetUserVoteUseCase(vote_service=vote_service)

    @provide
    def get_list_comment_votes_use_case(
        self, vote_service: VoteService
    ) -> ListCommentVotesUseCase:
        return ListCommentVotesUseCase(vote_service=vote_service)

    @provide
    def get_vote_history_use_case(
        self, vote_service: VoteService, comment_repository: CommentRepository
    ) -> GetVoteHistoryUseCase:
        return GetVoteHistoryUseCase(
            vote_service=vote_service, comment_repository=comment_repository
        )

    @provide
    def get_bulk_submit_votes_use_case(
        self, vote_service: VoteService, pagination_settings: PaginationSettings
    ) -> BulkSubmitVotesUseCase:
        return BulkSubmitVotesUseCase(
            vote_service=vote_service, pagination_settings=pagination_settings
        )

    # Stats use cases
    @provide
    def get_comment_vote_stats_use_case(
        self, stats_reporter: StatsReporter
    ) -> GetCommentVoteStatsUseCase:
        return GetCommentVoteStatsUseCase(stats_reporter=stats_reporter)

    @provide
    def get_personality_stats_use_case(
        self, stats_reporter: StatsReporter
    ) -> GetPersonalityStatsUseCase:
        return GetPersonalityStatsUseCase(stats_reporter=stats_reporter)

    @provide
    def get_top_comments_use_case(
        self, stats_reporter: StatsReporter
    ) -> GetTopCommentsUseCase:
        return GetTopCommentsUseCase(stats_reporter=stats_reporter)

    @provide
    def get_vote_count_use_case(
        self, stats_reporter: StatsReporter
    ) -> GetVoteCountUseCase:
        return GetVoteCountUseCase(stats_reporter=stats_reporter)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_comment_use_case(self, comment_service: CommentService) -> GetCommentUseCase:
        return GetCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_ranker: CommentRanker
    ) -> ListCommentsUseCase:
        """Provide ranked comment listing use case."""
        return ListCommentsUseCase(comment_ranker=comment_ranker)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        return CountCommentsUseCase(comment_service=comment_service)

    @provide
    def get_comment_stats_use_case(
        self, comment_service: CommentService
    ) -> GetCommentStatsUseCase:
        return GetCommentStatsUseCase(comment_service=comment_service)

    # Profile use cases
    @provide
    def get_profile_use_case(self, profile_service: ProfileService) -> GetProfileUseCase:
        return GetProfileUseCase(profile_service=profile_service)

    @provide
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        return ListProfilesUseCase(profile_service=profile_service)

    @provide
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(profile_service=profile_service)

    @provide
    def get_delete_profile_use_case(
        self, profile_service: ProfileService
    ) -> DeleteProfileUseCase:
        return DeleteProfileUseCase(profile_service=profile_service)

    @provide
    def get_profile_stats_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileStatsUseCase:
        return GetProfileStatsUseCase(profile_service=profile_service)
