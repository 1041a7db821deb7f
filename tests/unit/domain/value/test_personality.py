"""Unit tests for personality systems and values."""

import pytest

from persona.domain.error import ValidationError
from persona.domain.value import (
    PERSONALITY_VALUES,
    Pagination,
    PersonalitySystem,
    normalize_personality_value,
)


class TestPersonalitySystem:
    def test_parse_is_case_insensitive(self):
        assert PersonalitySystem.parse(" MBTI ") is PersonalitySystem.MBTI

    def test_parse_rejects_unknown_system(self):
        with pytest.raises(ValidationError) as exc_info:
            PersonalitySystem.parse("big5")

        assert exc_info.value.field == "personality_system"


class TestNormalizePersonalityValue:
    @pytest.mark.parametrize(
        "system,raw,expected",
        [
            (PersonalitySystem.MBTI, "intj", "INTJ"),
            (PersonalitySystem.ENNEAGRAM, "5W4", "5w4"),
            (PersonalitySystem.ZODIAC, "  sagittarius ", "Sagittarius"),
        ],
    )
    def test_values_are_canonicalized(self, system, raw, expected):
        assert normalize_personality_value(system, raw, 50) == expected

    def test_blank_value_is_required(self):
        with pytest.raises(ValidationError, match="required"):
            normalize_personality_value(PersonalitySystem.MBTI, "   ", 50)

    def test_length_is_counted_in_code_points(self):
        # Four code points, eight UTF-8 bytes
        with pytest.raises(ValidationError, match="Invalid mbti value"):
            normalize_personality_value(PersonalitySystem.MBTI, "ÍÑŤĴ", 4)

    def test_value_from_another_system_is_rejected(self):
        with pytest.raises(ValidationError, match="Invalid zodiac value"):
            normalize_personality_value(PersonalitySystem.ZODIAC, "INTJ", 50)

    def test_value_sets(self):
        assert len(PERSONALITY_VALUES[PersonalitySystem.MBTI]) == 16
        assert len(PERSONALITY_VALUES[PersonalitySystem.ENNEAGRAM]) == 18
        assert len(PERSONALITY_VALUES[PersonalitySystem.ZODIAC]) == 12


class TestPagination:
    def test_totals_round_up(self):
        pagination = Pagination.from_totals(page=1, limit=3, total_count=7)

        assert pagination.total_pages == 3
        assert pagination.has_next_page
        assert not pagination.has_prev_page
        assert pagination.offset == 0

    def test_empty_listing(self):
        pagination = Pagination.from_totals(page=1, limit=10, total_count=0)

        assert pagination.total_pages == 0
        assert not pagination.has_next_page
