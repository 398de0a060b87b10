"""Tests for UUIDValidator class."""

import logging

from rfcuuid import UUIDValidator, ValidationResult


class TestValidationResult:
    """Tests for ValidationResult dataclass."""

    def test_validation_result_valid(self) -> None:
        """Test creating valid ValidationResult."""
        result = ValidationResult(valid=True)

        assert result.valid is True
        assert result.error is None
        assert result.warnings == []

    def test_validation_result_invalid(self) -> None:
        """Test creating invalid ValidationResult."""
        result = ValidationResult(valid=False, error="Invalid format")

        assert result.valid is False
        assert result.error == "Invalid format"
        assert result.warnings == []


class TestUUIDValidatorValidate:
    """Tests for UUIDValidator.validate()."""

    def test_validate_v4(self) -> None:
        """Test validating a version 4 UUID."""
        result = UUIDValidator().validate("0f1e2d3c-4b5a-4968-8776-8594a3b2c1d0")

        assert result.valid is True
        assert result.error is None
        assert result.warnings == []

    def test_validate_v1(self) -> None:
        """Test validating a version 1 UUID."""
        result = UUIDValidator().validate("13814000-1dd2-11b2-9234-010203040506")

        assert result.valid is True
        assert result.warnings == []

    def test_validate_unsupported_version(self) -> None:
        """Test that other versions validate with a warning."""
        result = UUIDValidator().validate("12345678-1234-5678-9abc-123456789012")

        assert result.valid is True
        assert result.warnings == ["Unsupported UUID version: 5"]

    def test_validate_non_rfc_variant(self) -> None:
        """Test that a non-RFC 4122 variant validates with a warning."""
        result = UUIDValidator().validate("12345678-1234-4678-c000-123456789012")

        assert result.valid is True
        assert result.warnings == ["Not an RFC 4122 variant: 11"]

    def test_validate_nil_has_both_warnings(self) -> None:
        """Test the nil UUID."""
        result = UUIDValidator().validate("00000000-0000-0000-0000-000000000000")

        assert result.valid is True
        assert len(result.warnings) == 2

    def test_validate_invalid(self, caplog) -> None:
        """Test that malformed strings are invalid and logged."""
        with caplog.at_level(logging.DEBUG, logger="rfcuuid.validator"):
            result = UUIDValidator().validate("not-a-uuid")

        assert result.valid is False
        assert result.error == "Invalid UUID format: 'not-a-uuid'"
        assert "Rejected UUID string" in caplog.text

    def test_validate_non_string(self) -> None:
        """Test that non-string input is invalid."""
        result = UUIDValidator().validate(None)

        assert result.valid is False
        assert "None" in result.error
