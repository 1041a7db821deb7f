"""Unit tests for the comment tally invariant."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from persona.domain.value import PersonalitySystem, VoteDelta
from tests.conftest import make_comment

MBTI = PersonalitySystem.MBTI
ZODIAC = PersonalitySystem.ZODIAC


class TestCommentTally:
    """total_votes always equals the sum of vote_stats."""

    def test_every_system_has_a_bucket(self):
        comment = make_comment()

        assert set(comment.vote_stats) == set(PersonalitySystem)

    def test_negative_counts_are_rejected(self):
        with pytest.raises(PydanticValidationError):
            make_comment(vote_stats={MBTI: {"INTJ": -1}}, total_votes=0)

    def test_zero_counts_are_dropped(self):
        comment = make_comment(vote_stats={MBTI: {"INTJ": 0, "ENFP": 2}})

        assert comment.vote_stats[MBTI] == {"ENFP": 2}

    @pytest.mark.parametrize(
        "deltas",
        [
            [VoteDelta.new_vote(MBTI, "INTJ")],
            [VoteDelta.new_vote(MBTI, "INTJ"), VoteDelta.vote_change(MBTI, "INTJ", "ENFP")],
            [VoteDelta.new_vote(ZODIAC, "Leo"), VoteDelta.vote_removal(ZODIAC, "Leo")],
            [VoteDelta.vote_removal(MBTI, "INTJ")],
            [
                VoteDelta.new_vote(MBTI, "INTJ"),
                VoteDelta.new_vote(ZODIAC, "Leo"),
                VoteDelta.vote_change(MBTI, "ISTP", "ENFP"),
            ],
        ],
    )
    def test_total_matches_tally_after_any_deltas(self, deltas):
        comment = make_comment()

        for delta in deltas:
            comment = comment.apply_vote_delta(delta).comment

        assert comment.total_votes == comment.tallied_votes
        assert all(
            count > 0 for values in comment.vote_stats.values() for count in values.values()
        )

    def test_clamped_values_are_reported(self):
        comment = make_comment(vote_stats={MBTI: {"ENFP": 1}})

        update = comment.apply_vote_delta(VoteDelta.vote_change(MBTI, "INTJ", "ISTP"))

        assert update.clamped_values == ["INTJ"]
        assert update.comment.vote_stats[MBTI] == {"ENFP": 1, "ISTP": 1}
        assert update.comment.total_votes == 2

    def test_apply_does_not_mutate_original(self):
        comment = make_comment(vote_stats={MBTI: {"INTJ": 1}})

        comment.apply_vote_delta(VoteDelta.new_vote(MBTI, "INTJ"))

        assert comment.vote_stats[MBTI] == {"INTJ": 1}
        assert comment.total_votes == 1
