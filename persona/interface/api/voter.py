"""Voter identity from the incoming HTTP request."""

from fastapi import Request

from persona.domain.service import VoterIdentityService
from persona.domain.value import VoterKey, VoterMetadata


def voter_metadata(request: Request) -> VoterMetadata:
    """Collect the connection metadata a voter key is derived from."""
    return VoterMetadata(
        forwarded_for=request.headers.get("x-forwarded-for"),
        remote_addr=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


def client_address(request: Request) -> str:
    """Best-effort client IP: first X-Forwarded-For hop, then the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and forwarded.split(",")[0].strip():
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


def voter_key(request: Request, identity: VoterIdentityService) -> VoterKey:
    return identity.identify(voter_metadata(request))
