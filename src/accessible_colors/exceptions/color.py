"""Color decoding exceptions."""

from typing import Any

from .base import AccessibleColorsError


class InvalidColorError(AccessibleColorsError):
    """A value could not be decoded as a hex color."""

    recoverable = True

    def __init__(self, value: Any, reason: str = "expected 6 hex digits"):
        """
        Initialize invalid color error.

        Args:
            value: The value that failed to decode
            reason: Why decoding failed
        """
        super().__init__(
            f"Invalid color {value!r}: {reason}",
            hint="Use the #RRGGBB form, e.g. #1a2b3c (the leading '#' is optional)",
            detail=f"Hex decode failed for {value!r} ({type(value).__name__}): {reason}",
        )
        self.value = value
        self.reason = reason
