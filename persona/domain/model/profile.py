"""Profile entity.

Profiles describe a person (or character) along several personality
systems. Comments and votes hang off a profile by its numeric ID.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BeforeValidator, Field, StringConstraints

from persona.domain.model.common import DomainModel
from persona.domain.value import MAX_PROFILE_ID, MIN_PROFILE_ID, ProfileId


def _normalize_code(value):
    if isinstance(value, str):
        return value.strip().upper()
    return value


# Goes after the constraints in Annotated so it runs before the pattern check.
Uppercased = BeforeValidator(_normalize_code)

ProfileIdField = Annotated[int, Field(ge=MIN_PROFILE_ID, le=MAX_PROFILE_ID)]
ProfileName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
ProfileDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=10, max_length=1000)]
MbtiCode = Annotated[str, StringConstraints(pattern=r"^[IE][SN][TF][JP]$"), Uppercased]
EnneagramCode = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=10)]
InstinctVariant = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=20)]
Tritype = Annotated[int, Field(ge=100, le=999)]
SocionicsCode = Annotated[str, StringConstraints(min_length=2, max_length=10), Uppercased]
SloanCode = Annotated[str, StringConstraints(pattern=r"^[RS][CL][OU][AE][NI]$"), Uppercased]
PsycheCode = Annotated[str, StringConstraints(pattern=r"^[FLVE]{4}$"), Uppercased]
ImageUrl = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"(?i)^https?://\S+\.(jpg|jpeg|png|gif|webp)$")]  # fmt: skip


class Profile(DomainModel):
    """Profile entity."""

    id: ProfileId
    name: ProfileName
    description: ProfileDescription
    mbti: MbtiCode
    enneagram: EnneagramCode
    variant: InstinctVariant
    tritype: Tritype
    socionics: SocionicsCode
    sloan: SloanCode
    psyche: PsycheCode
    image: ImageUrl
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
