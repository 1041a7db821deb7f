"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from persona.domain.model import Comment, Profile
from persona.domain.value import CommentId, ProfileId, VoteStats

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_profile(profile_id: int = 1, **overrides) -> Profile:
    """Build a valid profile, overriding any field."""
    fields = {
        "id": ProfileId(profile_id),
        "name": "A Martinez",
        "description": "Adolph Larrue Martinez III.",
        "mbti": "ISFJ",
        "enneagram": "9w3",
        "variant": "sp/so",
        "tritype": 725,
        "socionics": "SEE",
        "sloan": "RCOEN",
        "psyche": "FEVL",
        "image": "https://soulverse.boo.world/images/1.png",
    }
    fields.update(overrides)
    return Profile(**fields)


def make_comment(
    profile_id: int = 1,
    minutes: int = 0,
    vote_stats: VoteStats | None = None,
    **overrides,
) -> Comment:
    """Build a comment created ``minutes`` after a fixed base time.

    total_votes is derived from vote_stats unless given explicitly.
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    stats = vote_stats or {}
    fields = {
        "id": CommentId(uuid4()),
        "profile_id": ProfileId(profile_id),
        "content": f"Comment posted at minute {minutes}",
        "author": "tester",
        "vote_stats": stats,
        "total_votes": sum(sum(values.values()) for values in stats.values()),
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)


# Profile creation payload as an API client sends it
PROFILE_PAYLOAD = {
    "profileId": 1,
    "name": "A Martinez",
    "description": "Adolph Larrue Martinez III.",
    "mbti": "isfj",
    "enneagram": "9w3",
    "variant": "sp/so",
    "tritype": 725,
    "socionics": "SEE",
    "sloan": "RCOEN",
    "psyche": "FEVL",
    "image": "https://soulverse.boo.world/images/1.png",
}
