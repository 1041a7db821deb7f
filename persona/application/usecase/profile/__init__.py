"""Profile use cases."""

from .create_profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
)
from .delete_profile import (
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
)
from .get_profile import GetProfileRequest, GetProfileResponse, GetProfileUseCase
from .get_profile_stats import GetProfileStatsResponse, GetProfileStatsUseCase
from .list_profiles import ListProfilesRequest, ListProfilesResponse, ListProfilesUseCase
from .update_profile import (
    ProfileChanges,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "CreateProfileRequest",
    "CreateProfileResponse",
    "CreateProfileUseCase",
    "DeleteProfileRequest",
    "DeleteProfileResponse",
    "DeleteProfileUseCase",
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileStatsResponse",
    "GetProfileStatsUseCase",
    "GetProfileUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileChanges",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
