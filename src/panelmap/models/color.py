"""Color model for pixel writes."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    Remappers never look at colors; the channel values are handed to the
    inner surface exactly as given. The model is frozen so colors can be
    shared and hashed.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a CSS hex color string ('#AA55FF' or 'AA55FF').

        Raises:
            ValueError: If the string is not six hex digits
        """
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Example:
            >>> Color(r=255, g=0, b=0).to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
