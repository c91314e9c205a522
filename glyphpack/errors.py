from __future__ import annotations

from typing import Optional


class GlyphpackError(Exception):
    """Base class for all asset compiler failures."""


class EncodeError(GlyphpackError, ValueError):
    """Raster could not be encoded with the requested layout."""


class DimensionError(EncodeError):
    """Raster size does not match the declared tile grid."""

    def __init__(self, expected: int, actual: int, axis: str) -> None:
        super().__init__(f"Invalid image {axis}: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
        self.axis = axis


class ConfigurationError(EncodeError):
    """Tile grid, policy or preset values cannot be used."""


class KeymapError(GlyphpackError, ValueError):
    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line
