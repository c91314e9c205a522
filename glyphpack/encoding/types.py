from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..errors import ConfigurationError

Color = Tuple[int, ...]

CHANNELS = {"red": 0, "green": 1, "blue": 2, "alpha": 3}
MAX_TILE_WIDTH = 8


class Raster:
    """Read-only pixel surface consumed by the encoders.

    Implementations expose ``width``, ``height`` and ``pixel(x, y)``.
    """

    width: int
    height: int

    def pixel(self, x: int, y: int) -> Color:
        raise NotImplementedError


@dataclass(frozen=True)
class PixelRaster(Raster):
    """Row-major colour buffer, mostly useful for generated assets and tests."""

    pixels: List[Color]
    width: int

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if len(self.pixels) % self.width != 0:
            raise ValueError("Pixels length must be a multiple of width")

    @property
    def height(self) -> int:
        return len(self.pixels) // self.width

    def pixel(self, x: int, y: int) -> Color:
        return self.pixels[y * self.width + x]


class ChromaKeyMode(Enum):
    EQUAL_IS_BACKGROUND = "equal-is-background"
    EQUAL_IS_FOREGROUND = "equal-is-foreground"


@dataclass(frozen=True)
class ThresholdPolicy:
    """Pixel is foreground iff ``color[channel] == value``."""

    channel: int = CHANNELS["red"]
    value: int = 0xFF

    def __post_init__(self) -> None:
        if not 0 <= self.channel < len(CHANNELS):
            raise ConfigurationError(f"Invalid threshold channel: {self.channel}")
        if not 0 <= self.value <= 0xFF:
            raise ConfigurationError(f"Threshold value must be 0-255, got {self.value}")


@dataclass(frozen=True)
class ChromaKeyPolicy:
    """Pixel is classified by (in)equality with a reference colour.

    ``reference`` stays ``None`` until the encoder samples it from the raster.
    """

    mode: ChromaKeyMode = ChromaKeyMode.EQUAL_IS_BACKGROUND
    reference: Optional[Color] = None


ForegroundPolicy = Union[ThresholdPolicy, ChromaKeyPolicy]


@dataclass(frozen=True)
class TileGridSpec:
    tile_width: int
    tile_height: int
    columns: int
    rows: int
    margin: int = 0
    padding: int = 0

    def __post_init__(self) -> None:
        for name in ("tile_width", "tile_height", "columns", "rows"):
            if getattr(self, name) < 1:
                raise ConfigurationError(f"{name} must be at least 1, got {getattr(self, name)}")
        for name in ("margin", "padding"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.tile_width > MAX_TILE_WIDTH:
            raise ConfigurationError(
                f"Tile width {self.tile_width} exceeds {MAX_TILE_WIDTH} bits per packed row"
            )

    @property
    def capacity(self) -> int:
        return self.columns * self.rows
