"""Color value models."""

from pydantic import BaseModel, ConfigDict, Field


class RGB(BaseModel):
    """Standard 8-bit RGB color.

    The model is frozen so colors behave as immutable, hashable values.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to lowercase CSS hex color string (e.g., '#ff0000').

        Example:
            >>> RGB(r=255, g=0, b=0).to_hex()
            '#ff0000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


class HSL(BaseModel):
    """HSL color with every channel normalized to 0.0-1.0.

    Hue is a fraction of a full turn, so 0.5 is cyan and 1/3 is green.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(ge=0.0, le=1.0, description="Hue (0.0-1.0)")
    s: float = Field(ge=0.0, le=1.0, description="Saturation (0.0-1.0)")
    l: float = Field(ge=0.0, le=1.0, description="Lightness (0.0-1.0)")  # noqa: E741

    def with_lightness(self, lightness: float) -> "HSL":
        """Return a copy with the same hue and saturation and a new lightness."""
        return HSL(h=self.h, s=self.s, l=lightness)
