"""Strongly typed identifiers for domain entities.

Comments and votes are keyed by UUIDs generated by the service. Profiles
carry a numeric ID assigned by whoever creates them (1-99999).
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ProfileId = NewType("ProfileId", int)

MIN_PROFILE_ID = 1
MAX_PROFILE_ID = 99999
