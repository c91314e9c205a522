from .classify import classify
from .encoder import bind_policy, encode, encode_bitmap, encode_header
from .layout import expected_size, tile_rect, validate
from .packing import pack_row, pack_tile, stride_for_width
from .types import (
    CHANNELS,
    ChromaKeyMode,
    ChromaKeyPolicy,
    Color,
    ForegroundPolicy,
    PixelRaster,
    Raster,
    ThresholdPolicy,
    TileGridSpec,
)

__all__ = [
    "bind_policy",
    "CHANNELS",
    "ChromaKeyMode",
    "ChromaKeyPolicy",
    "classify",
    "Color",
    "encode",
    "encode_bitmap",
    "encode_header",
    "expected_size",
    "ForegroundPolicy",
    "pack_row",
    "pack_tile",
    "PixelRaster",
    "Raster",
    "stride_for_width",
    "ThresholdPolicy",
    "tile_rect",
    "TileGridSpec",
    "validate",
]
