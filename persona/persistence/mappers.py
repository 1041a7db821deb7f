"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from persona.domain.model import Comment, Profile, Vote
from persona.domain.value import (
    CommentId,
    PersonalitySystem,
    ProfileId,
    VoteId,
    VoterKey,
    VoteStats,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def vote_stats_to_json(vote_stats: VoteStats) -> Dict[str, Dict[str, int]]:
    """Convert a tally to the JSONB document stored on the comment row."""
    return {
        system.value: dict(vote_stats.get(system, {})) for system in PersonalitySystem
    }


def json_to_vote_stats(document: Dict[str, Dict[str, int]] | None) -> VoteStats:
    """Convert a JSONB tally document to a domain tally.

    Unknown system keys are ignored.
    """
    known = {system.value for system in PersonalitySystem}
    return {
        PersonalitySystem(key): {value: int(count) for value, count in values.items()}
        for key, values in (document or {}).items()
        if key in known
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        profile_id=ProfileId(row["profile_id"]),
        content=row["content"],
        title=row.get("title"),
        author=row["author"],
        is_visible=row["is_visible"],
        vote_stats=json_to_vote_stats(row.get("vote_stats")),
        total_votes=row["total_votes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data["vote_stats"] = vote_stats_to_json(comment.vote_stats)
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        profile_id=ProfileId(row["profile_id"]),
        personality_system=PersonalitySystem(row["personality_system"]),
        personality_value=row["personality_value"],
        voter_identifier=VoterKey(row["voter_identifier"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    data["personality_system"] = vote.personality_system.value
    return data


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=ProfileId(row["id"]),
        name=row["name"],
        description=row["description"],
        mbti=row["mbti"],
        enneagram=row["enneagram"],
        variant=row["variant"],
        tritype=row["tritype"],
        socionics=row["socionics"],
        sloan=row["sloan"],
        psyche=row["psyche"],
        image=row["image"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict."""
    return profile.model_dump()
