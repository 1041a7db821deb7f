"""Unit tests for profile use cases."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from persona.application.usecase.profile import (
    CreateProfileRequest,
    CreateProfileUseCase,
    ProfileChanges,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from persona.domain.error import DuplicateProfileError, NotFoundError, ValidationError
from persona.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

PROFILE_FIELDS = {
    "profileId": 42,
    "name": "Jo Tanaka",
    "description": "Amateur astronomer and baker.",
    "mbti": "INFP",
    "enneagram": "4w5",
    "variant": "sx/so",
    "tritype": 468,
    "socionics": "IEI",
    "sloan": "SLUAI",
    "psyche": "EVLF",
    "image": "https://example.com/jo.png",
}


class TestCreateProfileUseCase:
    """Tests for CreateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_create_profile_from_camel_case_payload(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateProfileUseCase)

        # Act
        response = await use_case.execute(
            CreateProfileRequest.model_validate(PROFILE_FIELDS)
        )

        # Assert
        assert response.profile.profile_id == 42
        assert response.profile.mbti == "INFP"

    @pytest.mark.asyncio
    async def test_duplicate_profile_id_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateProfileUseCase)
        request = CreateProfileRequest.model_validate(PROFILE_FIELDS)
        await use_case.execute(request)

        # Act & Assert
        with pytest.raises(DuplicateProfileError):
            await use_case.execute(request)

    def test_request_normalizes_lowercase_codes(self):
        request = CreateProfileRequest.model_validate(
            {
                **PROFILE_FIELDS,
                "mbti": " infp ",
                "socionics": "iei",
                "sloan": "sluai",
                "psyche": "evlf",
            }
        )

        assert (request.mbti, request.socionics, request.sloan, request.psyche) == (
            "INFP",
            "IEI",
            "SLUAI",
            "EVLF",
        )

    def test_request_rejects_malformed_codes(self):
        with pytest.raises(PydanticValidationError):
            CreateProfileRequest.model_validate({**PROFILE_FIELDS, "mbti": "ABCD"})
        with pytest.raises(PydanticValidationError):
            CreateProfileRequest.model_validate({**PROFILE_FIELDS, "profileId": 100000})


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile(5))

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(profile_id=5, changes=ProfileChanges(mbti="INTP"))
        )

        # Assert
        assert response.profile.mbti == "INTP"
        assert response.profile.name == "A Martinez"

    @pytest.mark.asyncio
    async def test_lowercase_changes_are_normalized(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile(5))

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(
                profile_id=5, changes=ProfileChanges(mbti="entj", psyche="lvfe")
            )
        )

        # Assert
        assert response.profile.mbti == "ENTJ"
        assert response.profile.psyche == "LVFE"

    @pytest.mark.asyncio
    async def test_empty_update_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        await profile_repo.save(make_profile(5))

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateProfileRequest(profile_id=5, changes=ProfileChanges())
            )

    @pytest.mark.asyncio
    async def test_update_missing_profile_raises_not_found(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateProfileUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateProfileRequest(profile_id=6, changes=ProfileChanges(name="New Name"))
            )
