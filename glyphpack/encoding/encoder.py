from __future__ import annotations

import dataclasses
from typing import List

from .classify import classify
from .layout import tile_rect, validate
from .packing import pack_row, pack_tile
from .types import ChromaKeyPolicy, ForegroundPolicy, Raster, ThresholdPolicy, TileGridSpec
from ..errors import ConfigurationError

HEADER_FIELD_SIZE = 4


def bind_policy(raster: Raster, spec: TileGridSpec, policy: ForegroundPolicy) -> ForegroundPolicy:
    """Sample the chroma key reference from the margin origin if needed."""
    if isinstance(policy, ChromaKeyPolicy) and policy.reference is None:
        reference = tuple(raster.pixel(spec.margin, spec.margin))
        return dataclasses.replace(policy, reference=reference)
    return policy


def check_channel(raster: Raster, policy: ForegroundPolicy) -> None:
    """Reject a threshold channel the raster pixels do not carry."""
    if not isinstance(policy, ThresholdPolicy) or raster.width == 0 or raster.height == 0:
        return
    arity = len(raster.pixel(0, 0))
    if policy.channel >= arity:
        raise ConfigurationError(f"Threshold channel {policy.channel} not present in {arity}-channel pixels")


def read_tile(raster: Raster, spec: TileGridSpec, policy: ForegroundPolicy, index: int) -> List[List[bool]]:
    origin_x, origin_y = tile_rect(index, spec)
    return [
        [classify(raster.pixel(origin_x + x, origin_y + y), policy) for x in range(spec.tile_width)]
        for y in range(spec.tile_height)
    ]


def encode(raster: Raster, spec: TileGridSpec, policy: ForegroundPolicy, tile_count: int) -> bytes:
    """Encode ``tile_count`` tiles of the raster in row-major order.

    The raster size is checked against the grid before any pixel is read, so
    a mismatch never yields partial output.
    """
    if not 0 <= tile_count <= spec.capacity:
        raise ConfigurationError(
            f"Tile count must be 0-{spec.capacity} for a {spec.columns}x{spec.rows} grid, got {tile_count}"
        )
    validate((raster.width, raster.height), spec)
    check_channel(raster, policy)
    policy = bind_policy(raster, spec, policy)
    out = bytearray()
    for index in range(tile_count):
        out += pack_tile(read_tile(raster, spec, policy, index))
    return bytes(out)


def encode_header(width: int, height: int) -> bytes:
    return width.to_bytes(HEADER_FIELD_SIZE, "little", signed=False) + height.to_bytes(
        HEADER_FIELD_SIZE, "little", signed=False
    )


def encode_bitmap(raster: Raster, policy: ForegroundPolicy = ThresholdPolicy()) -> bytes:
    """Encode the whole raster row by row behind a width/height header."""
    if not isinstance(policy, ThresholdPolicy):
        raise ConfigurationError("Bitmap mode only supports a threshold policy")
    check_channel(raster, policy)
    out = bytearray(encode_header(raster.width, raster.height))
    for y in range(raster.height):
        out += pack_row([classify(raster.pixel(x, y), policy) for x in range(raster.width)])
    return bytes(out)
