"""Tests for the exception hierarchy and error formatting."""

import pytest
from pydantic import BaseModel, Field, ValidationError

from accessible_colors.exceptions import (
    AccessibleColorsError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    InvalidColorError,
    format_error_for_display,
    wrap_pydantic_error,
)


class Limits(BaseModel):
    low: int = Field(default=0, ge=0)
    high: int = Field(default=10, le=10)


class TestErrorMessages:
    """Test user-facing messages."""

    @pytest.mark.unit
    def test_invalid_color(self):
        """Test that the bad value and reason show up in the message."""
        error = InvalidColorError("#ff", "expected 6 hex digits")
        assert str(error) == "Invalid color '#ff': expected 6 hex digits"
        assert error.value == "#ff"
        assert error.recoverable is True
        assert "#RRGGBB" in error.recovery_hint
        assert isinstance(error, AccessibleColorsError)

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        """Test that the hint is appended as a suggestion."""
        error = AccessibleColorsError("Something broke", hint="Try again")
        assert error.get_full_message() == "Something broke\n\nSuggestion: Try again"
        assert error.technical_message == "Something broke"

    @pytest.mark.unit
    def test_full_message_without_hint(self):
        """Test that no suggestion is added without a hint."""
        assert AccessibleColorsError("Oops").get_full_message() == "Oops"

    @pytest.mark.unit
    def test_technical_detail_kept_separately(self):
        """Test that log detail does not leak into the user message."""
        error = AccessibleColorsError("Save failed", detail="EACCES on /etc/x")
        assert str(error) == "Save failed"
        assert error.technical_message == "EACCES on /etc/x"
        assert error.recoverable is False

    @pytest.mark.unit
    def test_trailing_comma_is_called_out(self):
        """Test the specialized trailing comma message."""
        error = ConfigFileInvalidError("/tmp/config.json", "trailing comma at line 3")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "/tmp/config.json" in error.recovery_hint
        assert isinstance(error, ConfigurationError)

    @pytest.mark.unit
    def test_validation_hint_by_field(self):
        """Test that hints mention valid values for known fields."""
        error = ConfigValidationError("precision", 42, "too large", "/tmp/config.json")
        assert "'precision'" in error.user_message
        assert "between 0 and 10" in error.recovery_hint
        assert "/tmp/config.json" in error.recovery_hint


class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    @pytest.mark.unit
    def test_single_field(self):
        """Test that a single bad field is named."""
        with pytest.raises(ValidationError) as exc_info:
            Limits(low=-1)

        error = wrap_pydantic_error(exc_info.value, "limits.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "low"
        assert error.value == -1
        assert error.file_path == "limits.json"

    @pytest.mark.unit
    def test_multiple_fields(self):
        """Test that several bad fields are listed together."""
        with pytest.raises(ValidationError) as exc_info:
            Limits(low=-1, high=11)

        error = wrap_pydantic_error(exc_info.value, "limits.json")
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message
        assert "low" in error.user_message
        assert "high" in error.user_message

    @pytest.mark.unit
    def test_invalid_json(self):
        """Test that JSON syntax errors become file errors."""
        with pytest.raises(ValidationError) as exc_info:
            Limits.model_validate_json("{")

        error = wrap_pydantic_error(exc_info.value, "limits.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.file_path == "limits.json"

    @pytest.mark.unit
    def test_unknown_error(self):
        """Test the fallback for non-pydantic errors."""
        error = wrap_pydantic_error(RuntimeError("boom"), "limits.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "unknown"


class TestFormatErrorForDisplay:
    """Test display formatting."""

    @pytest.mark.unit
    def test_package_error(self):
        """Test that package errors show their message and hint."""
        message, hint = format_error_for_display(InvalidColorError("red"))
        assert message == "Invalid color 'red': expected 6 hex digits"
        assert hint is not None

    @pytest.mark.unit
    def test_other_error(self):
        """Test that other errors show their type."""
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)
