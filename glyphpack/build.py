from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Optional, Set

from .encoding import (
    ChromaKeyMode,
    ChromaKeyPolicy,
    ForegroundPolicy,
    ThresholdPolicy,
    TileGridSpec,
    encode,
    encode_bitmap,
)
from .errors import ConfigurationError
from .keymap import compile_keymap_file
from .presets import Preset, channel_index
from .rendering import IMAGE_EXTENSIONS, load_raster

KEYMAP_EXTENSIONS: Set[str] = {".txt", ".tsv"}
SUPPORTED_EXTENSIONS: Set[str] = IMAGE_EXTENSIONS | KEYMAP_EXTENSIONS


@dataclass
class BuildSettings:
    tile_width: Optional[int] = None
    tile_height: Optional[int] = None
    columns: Optional[int] = None
    rows: Optional[int] = None
    margin: Optional[int] = None
    padding: Optional[int] = None
    tile_count: Optional[int] = None
    invert: bool = False
    channel: Optional[str] = None
    value: Optional[int] = None


class AssetBuilder:
    def __init__(self, preset: Preset, settings: Optional[BuildSettings] = None) -> None:
        self.preset = preset
        self.settings = settings or BuildSettings()

    def build_from_file(self, path: str) -> bytes:
        ext = self._validate_input_path(path)
        if ext in KEYMAP_EXTENSIONS:
            return compile_keymap_file(path)
        # Settle the configuration before decoding the image.
        policy = self._policy()
        if not self.preset.is_tiled:
            return encode_bitmap(load_raster(path), policy)
        spec = self._grid_spec()
        tile_count = self._tile_count(spec)
        return encode(load_raster(path), spec, policy, tile_count)

    def _grid_spec(self) -> TileGridSpec:
        overrides = {
            field.name: getattr(self.settings, field.name)
            for field in dataclasses.fields(TileGridSpec)
            if getattr(self.settings, field.name) is not None
        }
        return dataclasses.replace(self.preset.grid_spec(), **overrides)

    def _tile_count(self, spec: TileGridSpec) -> int:
        if self.settings.tile_count is not None:
            return self.settings.tile_count
        if self.preset.tile_count is None:
            return spec.capacity
        return min(self.preset.tile_count, spec.capacity)

    def _policy(self) -> ForegroundPolicy:
        policy = self.preset.policy()
        if isinstance(policy, ThresholdPolicy):
            if self.settings.invert:
                raise ConfigurationError("Invert only applies to chroma key presets")
            channel = policy.channel
            if self.settings.channel is not None:
                channel = channel_index(self.settings.channel)
            value = policy.value if self.settings.value is None else self.settings.value
            return ThresholdPolicy(channel=channel, value=value)
        if self.settings.channel is not None or self.settings.value is not None:
            raise ConfigurationError("Threshold channel/value do not apply to chroma key presets")
        if self.settings.invert:
            return ChromaKeyPolicy(mode=_inverted(policy.mode))
        return policy

    @staticmethod
    def _validate_input_path(path: str) -> str:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        return ext


def _inverted(mode: ChromaKeyMode) -> ChromaKeyMode:
    if mode is ChromaKeyMode.EQUAL_IS_BACKGROUND:
        return ChromaKeyMode.EQUAL_IS_FOREGROUND
    return ChromaKeyMode.EQUAL_IS_BACKGROUND
