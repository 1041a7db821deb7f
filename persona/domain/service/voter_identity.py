"""Anonymous voter identity.

Voting needs no account: a voter is recognised by the address the request
came from plus the start of its User-Agent. The same pair always maps to
the same key, which is what lets a voter change or remove an earlier vote.
"""

import re

from persona.config import VotingSettings
from persona.domain.value import VoterKey, VoterMetadata

from .base import Service

ANONYMOUS_ADDRESS = "anonymous"

_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def identify(metadata: VoterMetadata, user_agent_prefix_length: int = 50) -> VoterKey:
    """Derive a voter key from connection metadata.

    The address is the first entry of X-Forwarded-For when present, else the
    socket peer address, else "anonymous". It is joined to the User-Agent
    prefix with an underscore and every character outside [A-Za-z0-9_-] is
    dropped.

    Args:
        metadata: Connection metadata of the request
        user_agent_prefix_length: Number of User-Agent characters to keep

    Returns:
        Voter key (never empty)
    """
    if metadata.forwarded_for:
        address = metadata.forwarded_for.split(",")[0].strip()
    else:
        address = metadata.remote_addr
    address = address or ANONYMOUS_ADDRESS

    agent_prefix = (metadata.user_agent or "")[:user_agent_prefix_length]
    return VoterKey(_DISALLOWED_CHARS.sub("", f"{address}_{agent_prefix}"))


class VoterIdentityService(Service):
    """Derives voter keys using the configured User-Agent prefix length."""

    def __init__(self, voting_settings: VotingSettings) -> None:
        self.voting_settings = voting_settings

    def identify(self, metadata: VoterMetadata) -> VoterKey:
        return identify(metadata, self.voting_settings.user_agent_prefix_length)
