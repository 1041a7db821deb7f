"""Unit tests for VoteService."""

import asyncio
from uuid import uuid4

import pytest

from persona.domain.error import NotFoundError, ValidationError, VoteTallyError
from persona.domain.repository import CommentRepository, VoteRepository
from persona.domain.service import VoteAggregator, VoteService
from persona.domain.value import CommentId, PersonalitySystem, VoterKey
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

MBTI = PersonalitySystem.MBTI


async def _seed_comment(unit_env, **overrides):
    comment_repo = await unit_env.get(CommentRepository)
    return await comment_repo.save(make_comment(**overrides))


class TestSubmitVote:
    """Tests for casting and changing votes."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created_and_counted(self, unit_env):
        """A first vote should be stored and tallied once."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("127001_test-agent")

        # Act
        outcome = await vote_service.submit(comment.id, voter, "mbti", "INTJ")

        # Assert
        assert outcome.is_new_vote
        assert outcome.vote.personality_value == "INTJ"
        assert outcome.vote.profile_id == comment.profile_id

        updated = await comment_repo.find_by_id(comment.id)
        assert updated.vote_stats[MBTI] == {"INTJ": 1}
        assert updated.total_votes == 1

    @pytest.mark.asyncio
    async def test_resubmitting_same_value_is_idempotent(self, unit_env):
        """Voting the same value twice should count once."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")

        # Act
        await vote_service.submit(comment.id, voter, MBTI, "INTJ")
        second = await vote_service.submit(comment.id, voter, MBTI, "intj")

        # Assert
        assert not second.is_new_vote
        assert second.is_unchanged
        assert await vote_repo.count_by_comment(comment.id) == 1

        updated = await comment_repo.find_by_id(comment.id)
        assert updated.vote_stats[MBTI] == {"INTJ": 1}
        assert updated.total_votes == 1

    @pytest.mark.asyncio
    async def test_revote_moves_count_to_new_value(self, unit_env):
        """Changing INTJ to ENFP should move the count, not add one."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")
        first = await vote_service.submit(comment.id, voter, MBTI, "INTJ")

        # Act
        outcome = await vote_service.submit(comment.id, voter, MBTI, "ENFP")

        # Assert
        assert outcome.previous_value == "INTJ"
        assert outcome.vote.id == first.vote.id
        assert outcome.vote.personality_value == "ENFP"

        updated = await comment_repo.find_by_id(comment.id)
        assert updated.vote_stats[MBTI] == {"ENFP": 1}
        assert updated.total_votes == 1

    @pytest.mark.asyncio
    async def test_votes_under_different_systems_are_independent(self, unit_env):
        """One voter may hold one vote per system on the same comment."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")

        # Act
        await vote_service.submit(comment.id, voter, "mbti", "INTJ")
        await vote_service.submit(comment.id, voter, "enneagram", "5w4")
        await vote_service.submit(comment.id, voter, "zodiac", "leo")

        # Assert
        updated = await comment_repo.find_by_id(comment.id)
        assert updated.total_votes == 3
        assert updated.vote_stats[PersonalitySystem.ZODIAC] == {"Leo": 1}

    @pytest.mark.asyncio
    async def test_explicit_profile_id_is_kept(self, unit_env):
        """An explicit profile ID should override the comment's profile."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env, profile_id=1)

        # Act
        outcome = await vote_service.submit(
            comment.id, VoterKey("voter-a"), MBTI, "INTJ", profile_id=42
        )

        # Assert
        assert outcome.vote.profile_id == 42

    @pytest.mark.asyncio
    async def test_invalid_value_is_rejected_without_side_effects(self, unit_env):
        """A value outside the system's set should raise and store nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await vote_service.submit(comment.id, VoterKey("voter-a"), MBTI, "XXXX")

        assert exc_info.value.field == "personality_value"
        assert await vote_repo.count_by_comment(comment.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_system_is_rejected(self, unit_env):
        """An unknown personality system should raise ValidationError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="personality_system"):
            await vote_service.submit(comment.id, VoterKey("voter-a"), "socionics", "ILE")

    @pytest.mark.asyncio
    async def test_overlong_value_is_rejected(self, unit_env):
        """A value longer than the configured limit should be rejected."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError, match="must not exceed 50"):
            await vote_service.submit(comment.id, VoterKey("voter-a"), MBTI, "I" * 51)

    @pytest.mark.asyncio
    async def test_overlong_voter_key_is_rejected(self, unit_env):
        """A voter key longer than the configured limit should be rejected."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await vote_service.submit(comment.id, VoterKey("v" * 101), MBTI, "INTJ")

        assert exc_info.value.field == "voter_identifier"

    @pytest.mark.asyncio
    async def test_vote_on_missing_comment_raises_not_found(self, unit_env):
        """Voting on a comment that does not exist should raise NotFoundError."""
        # Arrange
        vote_service = await unit_env.get(VoteService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.submit(
                CommentId(uuid4()), VoterKey("voter-a"), MBTI, "INTJ"
            )

    @pytest.mark.asyncio
    async def test_vote_on_hidden_comment_raises_not_found(self, unit_env):
        """Soft-deleted comments cannot be voted on."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env, is_visible=False)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await vote_service.submit(comment.id, VoterKey("voter-a"), MBTI, "INTJ")


class TestRemoveVote:
    """Tests for vote removal."""

    @pytest.mark.asyncio
    async def test_remove_deletes_vote_and_uncounts_it(self, unit_env):
        """Removing a vote should restore the tally to its prior state."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")
        await vote_service.submit(comment.id, voter, MBTI, "INTJ")

        # Act
        removed = await vote_service.remove(comment.id, voter, "MBTI")

        # Assert
        assert removed is not None
        assert removed.personality_value == "INTJ"
        assert await vote_repo.find_by_key(comment.id, voter, MBTI) is None

        updated = await comment_repo.find_by_id(comment.id)
        assert updated.vote_stats[MBTI] == {}
        assert updated.total_votes == 0

    @pytest.mark.asyncio
    async def test_remove_without_vote_returns_none(self, unit_env):
        """Removing a vote that was never cast should change nothing."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await _seed_comment(unit_env, vote_stats={MBTI: {"INTJ": 2}})

        # Act
        removed = await vote_service.remove(comment.id, VoterKey("voter-a"), MBTI)

        # Assert
        assert removed is None
        unchanged = await comment_repo.find_by_id(comment.id)
        assert unchanged.total_votes == 2


class TestConcurrentVoting:
    """Interleaved submissions must keep tallies consistent with votes."""

    @pytest.mark.asyncio
    async def test_concurrent_votes_from_distinct_voters_are_all_counted(
        self, unit_env
    ):
        """N concurrent voters should yield a total of exactly N."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)
        values = ["INTJ", "ENFP", "ISTP", "INTJ", "ESFJ"] * 4

        # Act
        await asyncio.gather(
            *(
                vote_service.submit(comment.id, VoterKey(f"voter-{i}"), MBTI, value)
                for i, value in enumerate(values)
            )
        )

        # Assert
        updated = await comment_repo.find_by_id(comment.id)
        assert updated.total_votes == len(values)
        assert updated.vote_stats[MBTI]["INTJ"] == 8
        assert updated.tallied_votes == updated.total_votes
        assert await vote_repo.count_by_comment(comment.id) == len(values)

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_submissions_count_once(self, unit_env):
        """The same voter submitting the same vote concurrently counts once."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")

        # Act
        outcomes = await asyncio.gather(
            *(vote_service.submit(comment.id, voter, MBTI, "INTJ") for _ in range(5))
        )

        # Assert
        assert sum(1 for o in outcomes if o.is_new_vote) == 1
        assert await vote_repo.count_by_comment(comment.id) == 1
        updated = await comment_repo.find_by_id(comment.id)
        assert updated.vote_stats[MBTI] == {"INTJ": 1}
        assert updated.total_votes == 1

    @pytest.mark.asyncio
    async def test_concurrent_changes_from_one_voter_leave_one_vote(self, unit_env):
        """Racing revotes by one voter leave a single vote matching the tally."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        comment = await _seed_comment(unit_env)
        voter = VoterKey("voter-a")

        # Act
        await asyncio.gather(
            *(
                vote_service.submit(comment.id, voter, MBTI, value)
                for value in ("INTJ", "ENFP", "ISTP")
            )
        )

        # Assert
        stored = await vote_repo.find_by_key(comment.id, voter, MBTI)
        updated = await comment_repo.find_by_id(comment.id)
        assert await vote_repo.count_by_comment(comment.id) == 1
        assert updated.vote_stats[MBTI] == {stored.personality_value: 1}
        assert updated.total_votes == 1


class FailingAggregator(VoteAggregator):
    """Aggregator whose writes always fail."""

    async def _apply(self, comment_id, delta):
        raise RuntimeError("tally store unavailable")


class TestTallyFailure:
    """A failed tally write must surface as VoteTallyError."""

    @pytest.mark.asyncio
    async def test_tally_failure_raises_vote_tally_error(self, unit_env):
        """Tally failures should not be reported as caller errors."""
        # Arrange
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        base_service = await unit_env.get(VoteService)
        vote_service = VoteService(
            vote_repository=vote_repo,
            comment_repository=comment_repo,
            vote_aggregator=FailingAggregator(comment_repo),
            voting_settings=base_service.voting_settings,
            pagination_settings=base_service.pagination_settings,
        )
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(VoteTallyError) as exc_info:
            await vote_service.submit(comment.id, VoterKey("voter-a"), MBTI, "INTJ")

        assert isinstance(exc_info.value.__cause__, RuntimeError)


class TestListVotes:
    """Tests for vote listings."""

    @pytest.mark.asyncio
    async def test_list_for_comment_filters_by_system_and_paginates(self, unit_env):
        """Listing should honor the system filter and report true totals."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env)
        for i in range(3):
            await vote_service.submit(comment.id, VoterKey(f"v{i}"), MBTI, "INTJ")
        await vote_service.submit(comment.id, VoterKey("v0"), "zodiac", "Leo")

        # Act
        votes, pagination = await vote_service.list_for_comment(
            comment.id, "mbti", page=1, limit=2
        )

        # Assert
        assert len(votes) == 2
        assert all(v.personality_system == MBTI for v in votes)
        assert pagination.total_count == 3
        assert pagination.total_pages == 2
        assert pagination.has_next_page

    @pytest.mark.asyncio
    async def test_history_returns_only_the_voters_votes(self, unit_env):
        """History should be scoped to one voter."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        first = await _seed_comment(unit_env, minutes=1)
        second = await _seed_comment(unit_env, minutes=2)
        voter = VoterKey("voter-a")
        await vote_service.submit(first.id, voter, MBTI, "INTJ")
        await vote_service.submit(second.id, voter, MBTI, "ENFP")
        await vote_service.submit(second.id, VoterKey("voter-b"), MBTI, "ENFP")

        # Act
        votes, pagination = await vote_service.history(voter)

        # Assert
        assert pagination.total_count == 2
        assert {v.comment_id for v in votes} == {first.id, second.id}
        assert all(v.voter_identifier == voter for v in votes)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, None), (None, 0), (1, 101)])
    async def test_zero_page_or_limit_is_rejected(self, unit_env, page, limit):
        """Zero is a bad request, not a request for the default."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment = await _seed_comment(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await vote_service.list_for_comment(comment.id, page=page, limit=limit)
        with pytest.raises(ValidationError):
            await vote_service.history(VoterKey("voter-a"), page=page, limit=limit)
