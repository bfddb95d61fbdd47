"""Tests for input validators."""

import pytest
from media_organizer import ValidationError
from media_organizer.validation import generate_public_id
from media_organizer.validation import validate_file_size
from media_organizer.validation import validate_file_type
from media_organizer.validation import validate_public_id


class TestValidateFileType:
    """Test validate_file_type function."""

    def test_wildcard(self):
        validate_file_type("image/png", ["image/*"])

    def test_exact(self):
        validate_file_type("video/mp4", ["video/mp4", "video/webm"])

    def test_rejected(self):
        with pytest.raises(ValidationError, match="not allowed"):
            validate_file_type("application/pdf", ["image/*"])

    def test_prefix_is_not_enough(self):
        with pytest.raises(ValidationError):
            validate_file_type("imagery/x", ["image/*"])


class TestValidateFileSize:
    """Test validate_file_size function."""

    def test_within_limit(self):
        validate_file_size(1024, 1024)

    def test_over_limit(self):
        with pytest.raises(ValidationError, match="exceeds maximum size of 1.00MB"):
            validate_file_size(2 * 1024 * 1024, 1024 * 1024)


class TestPublicId:
    """Test public ID helpers."""

    def test_valid(self):
        validate_public_id("art/2024/my-photo_1")

    @pytest.mark.parametrize("public_id", ["", "a b", "a.jpg", "ä"])
    def test_invalid(self, public_id):
        with pytest.raises(ValidationError):
            validate_public_id(public_id)

    def test_generate(self):
        assert generate_public_id("My Photo (1).JPG") == "my-photo-1"

    def test_generate_with_folder(self):
        assert generate_public_id("a.png", folder="/art/2024/") == "art/2024/a"

    def test_generate_with_timestamp(self):
        public_id = generate_public_id("a.png", use_timestamp=True)
        prefix, stamp = public_id.split("-")
        assert prefix == "a"
        assert stamp.isdigit()
