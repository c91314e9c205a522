from __future__ import annotations

from typing import Tuple

from .types import TileGridSpec
from ..errors import DimensionError


def expected_extent(count: int, size: int, margin: int, padding: int) -> int:
    return 2 * margin + count * size + (count - 1) * padding


def expected_size(spec: TileGridSpec) -> Tuple[int, int]:
    """Return the raster (width, height) implied by the tile grid."""
    width = expected_extent(spec.columns, spec.tile_width, spec.margin, spec.padding)
    height = expected_extent(spec.rows, spec.tile_height, spec.margin, spec.padding)
    return width, height


def validate(raster_dims: Tuple[int, int], spec: TileGridSpec) -> None:
    """Raise DimensionError unless the raster exactly fits the grid."""
    width, height = expected_size(spec)
    actual_width, actual_height = raster_dims
    if actual_width != width:
        raise DimensionError(width, actual_width, "width")
    if actual_height != height:
        raise DimensionError(height, actual_height, "height")


def tile_rect(index: int, spec: TileGridSpec) -> Tuple[int, int]:
    """Return the top-left pixel of tile ``index`` (row-major, 0-based)."""
    origin_x = spec.margin + (spec.tile_width + spec.padding) * (index % spec.columns)
    origin_y = spec.margin + (spec.tile_height + spec.padding) * (index // spec.columns)
    return origin_x, origin_y
