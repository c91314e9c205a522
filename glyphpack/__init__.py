"""Build-time compilers for kernel fonts, bitmaps and keyboard maps."""

from .build import AssetBuilder, BuildSettings
from .errors import ConfigurationError, DimensionError, EncodeError, GlyphpackError, KeymapError
from .presets import Preset, PresetRegistry

__version__ = "0.1.0"

__all__ = [
    "AssetBuilder",
    "BuildSettings",
    "ConfigurationError",
    "DimensionError",
    "EncodeError",
    "GlyphpackError",
    "KeymapError",
    "Preset",
    "PresetRegistry",
]
