"""Vote entity.

A vote classifies a comment's author under one personality system. Each
voter holds at most one vote per (comment, system); voting again replaces
the value in place.
"""

from datetime import datetime

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.value import (
    CommentId,
    PersonalitySystem,
    ProfileId,
    VoteId,
    VoterKey,
)


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per (comment_id, voter_identifier, personality_system),
      enforced by a database unique constraint
    - personality_value is always the canonical spelling for its system
    """

    id: VoteId
    comment_id: CommentId
    profile_id: ProfileId
    personality_system: PersonalitySystem
    personality_value: str = Field(min_length=1)
    voter_identifier: VoterKey
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class VoteUpsert(DomainModel):
    """Definitive outcome of writing a vote at its unique key.

    ``previous_value`` is None when the write created the vote, otherwise
    it holds the value the vote carried before the write.
    """

    vote: Vote
    previous_value: str | None = None

    @property
    def is_new_vote(self) -> bool:
        return self.previous_value is None

    @property
    def is_unchanged(self) -> bool:
        return self.previous_value == self.vote.personality_value
