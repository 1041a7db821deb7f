"""Unit tests for profile field rules."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from tests.conftest import make_profile


class TestProfileValidation:
    """Field constraints on profiles."""

    def test_seed_profile_is_valid(self):
        profile = make_profile(1)

        assert profile.psyche == "FEVL"

    def test_codes_are_uppercased(self):
        profile = make_profile(1, mbti="isfj", socionics="see", sloan="rcoen", psyche="fevl")

        assert (profile.mbti, profile.socionics, profile.sloan, profile.psyche) == (
            "ISFJ",
            "SEE",
            "RCOEN",
            "FEVL",
        )

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "A"),
            ("description", "too short"),
            ("mbti", "XNTJ"),
            ("enneagram", "9"),
            ("variant", "s"),
            ("tritype", 99),
            ("tritype", 1000),
            ("socionics", "S"),
            ("sloan", "RCOEX"),
            ("psyche", "FEVX"),
            ("image", "ftp://example.com/a.png"),
            ("image", "https://example.com/a.bmp"),
        ],
    )
    def test_invalid_fields_are_rejected(self, field, value):
        with pytest.raises(PydanticValidationError):
            make_profile(1, **{field: value})

    def test_image_extension_is_case_insensitive(self):
        profile = make_profile(1, image="https://example.com/photo.JPEG")

        assert profile.image.endswith(".JPEG")
