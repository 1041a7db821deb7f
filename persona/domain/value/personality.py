"""Personality systems, their valid values and vote tally deltas."""

from enum import Enum

from pydantic import Field

from persona.domain.error import ValidationError
from persona.domain.value.common import ValueObject


class PersonalitySystem(str, Enum):
    """Classification scheme a vote targets."""

    MBTI = "mbti"
    ENNEAGRAM = "enneagram"
    ZODIAC = "zodiac"

    @classmethod
    def parse(cls, raw: "str | PersonalitySystem") -> "PersonalitySystem":
        """Parse a system name case-insensitively.

        Raises:
            ValidationError: If the name is not a known system
        """
        if isinstance(raw, PersonalitySystem):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                "personality_system", f"Personality system must be one of: {allowed}"
            )


PERSONALITY_VALUES: dict[PersonalitySystem, tuple[str, ...]] = {
    PersonalitySystem.MBTI: (
        "INTJ", "INTP", "ENTJ", "ENTP",
        "INFJ", "INFP", "ENFJ", "ENFP",
        "ISTJ", "ISFJ", "ESTJ", "ESFJ",
        "ISTP", "ISFP", "ESTP", "ESFP",
    ),
    PersonalitySystem.ENNEAGRAM: (
        "1w9", "1w2", "2w1", "2w3", "3w2", "3w4",
        "4w3", "4w5", "5w4", "5w6", "6w5", "6w7",
        "7w6", "7w8", "8w7", "8w9", "9w8", "9w1",
    ),
    PersonalitySystem.ZODIAC: (
        "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
        "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
    ),
}  # fmt: skip

_CANONICAL_VALUES: dict[PersonalitySystem, dict[str, str]] = {
    system: {value.lower(): value for value in values}
    for system, values in PERSONALITY_VALUES.items()
}


def normalize_personality_value(
    system: PersonalitySystem, raw: str, max_length: int
) -> str:
    """Return the canonical spelling of a personality value.

    Matching is case-insensitive ("intj" -> "INTJ", "aries" -> "Aries").
    Length is counted in Unicode code points.

    Raises:
        ValidationError: If the value is empty, too long or not valid for the system
    """
    value = raw.strip()
    if not value:
        raise ValidationError("personality_value", "Personality value is required")
    if len(value) > max_length:
        raise ValidationError(
            "personality_value",
            f"Personality value must not exceed {max_length} characters",
        )
    canonical = _CANONICAL_VALUES[system].get(value.lower())
    if canonical is None:
        raise ValidationError(
            "personality_value",
            f"Invalid {system.value} value '{value}'. "
            f"Valid values: {', '.join(PERSONALITY_VALUES[system])}",
        )
    return canonical


# personality system -> personality value -> count
VoteStats = dict[PersonalitySystem, dict[str, int]]


def empty_vote_stats() -> VoteStats:
    """Tally with an empty bucket for every system."""
    return {system: {} for system in PersonalitySystem}


class VoteDelta(ValueObject):
    """Count changes to apply to one system bucket of a comment's tally."""

    personality_system: PersonalitySystem
    changes: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def new_vote(cls, system: PersonalitySystem, value: str) -> "VoteDelta":
        return cls(personality_system=system, changes={value: 1})

    @classmethod
    def vote_change(
        cls, system: PersonalitySystem, old_value: str, new_value: str
    ) -> "VoteDelta":
        return cls(personality_system=system, changes={old_value: -1, new_value: 1})

    @classmethod
    def vote_removal(cls, system: PersonalitySystem, value: str) -> "VoteDelta":
        return cls(personality_system=system, changes={value: -1})

    @property
    def is_empty(self) -> bool:
        return not any(self.changes.values())
