from __future__ import annotations

from typing import Sequence

from .types import MAX_TILE_WIDTH
from ..errors import ConfigurationError


def pack_tile(bits: Sequence[Sequence[bool]]) -> bytes:
    """Pack a tile one byte per row, bit ``x`` holding column ``x``."""
    out = bytearray()
    for row in bits:
        if len(row) > MAX_TILE_WIDTH:
            raise ConfigurationError(
                f"Tile row of {len(row)} pixels does not fit in {MAX_TILE_WIDTH} bits"
            )
        value = 0
        for bit, pix in enumerate(row):
            if pix:
                value |= 1 << bit
        out.append(value)
    return bytes(out)


def stride_for_width(width: int) -> int:
    return (width + 7) // 8


def pack_row(bits: Sequence[bool]) -> bytes:
    """Pack one raster row LSB-first into ``ceil(len(bits) / 8)`` bytes."""
    out = bytearray(stride_for_width(len(bits)))
    for x, pix in enumerate(bits):
        if pix:
            out[x // 8] |= 1 << (x % 8)
    return bytes(out)
