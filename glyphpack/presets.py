from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .encoding.types import CHANNELS, ChromaKeyMode, ChromaKeyPolicy, ForegroundPolicy, ThresholdPolicy, TileGridSpec
from .errors import ConfigurationError

DATA_PATH = Path(__file__).resolve().parent / "data" / "presets.json"
PRESETS_ENV_VAR = "GLYPHPACK_PRESETS"

MODE_TILES = "tiles"
MODE_STRIDE = "stride"
POLICY_THRESHOLD = "threshold"
POLICY_CHROMA_KEY = "chroma-key"

INT_FIELDS = ("tile_width", "tile_height", "columns", "rows", "margin", "padding", "tile_count", "value")
STR_FIELDS = ("name", "mode", "policy_kind", "description", "channel", "chroma_mode")


@dataclass(frozen=True)
class Preset:
    name: str
    mode: str
    policy_kind: str
    description: str = ""
    tile_width: int = 0
    tile_height: int = 0
    columns: int = 0
    rows: int = 0
    margin: int = 0
    padding: int = 0
    tile_count: Optional[int] = None
    channel: str = "red"
    value: int = 0xFF
    chroma_mode: str = ChromaKeyMode.EQUAL_IS_BACKGROUND.value

    @classmethod
    def from_dict(cls, raw: Dict[str, object]) -> "Preset":
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Preset entries must be JSON objects, got {raw!r}")
        data = dict(raw)
        if "policy" in data:
            data["policy_kind"] = data.pop("policy")
        try:
            preset = cls(**data)  # type: ignore[arg-type]
        except TypeError as exc:
            raise ConfigurationError(f"Invalid preset {raw.get('name', '?')!r}: {exc}") from exc
        _check_field_types(preset)
        if preset.mode not in (MODE_TILES, MODE_STRIDE):
            raise ConfigurationError(f"Preset {preset.name!r} has unknown mode {preset.mode!r}")
        if preset.policy_kind not in (POLICY_THRESHOLD, POLICY_CHROMA_KEY):
            raise ConfigurationError(f"Preset {preset.name!r} has unknown policy {preset.policy_kind!r}")
        return preset

    @property
    def is_tiled(self) -> bool:
        return self.mode == MODE_TILES

    def grid_spec(self) -> TileGridSpec:
        return TileGridSpec(
            tile_width=self.tile_width,
            tile_height=self.tile_height,
            columns=self.columns,
            rows=self.rows,
            margin=self.margin,
            padding=self.padding,
        )

    def policy(self) -> ForegroundPolicy:
        if self.policy_kind == POLICY_THRESHOLD:
            return ThresholdPolicy(channel=channel_index(self.channel), value=self.value)
        try:
            mode = ChromaKeyMode(self.chroma_mode)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown chroma key mode {self.chroma_mode!r}") from exc
        return ChromaKeyPolicy(mode=mode)


def _check_field_types(preset: Preset) -> None:
    for name in INT_FIELDS:
        value = getattr(preset, name)
        if value is None and name == "tile_count":
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"Preset {preset.name!r}: {name} must be an integer, got {value!r}")
    for name in STR_FIELDS:
        value = getattr(preset, name)
        if not isinstance(value, str):
            raise ConfigurationError(f"Preset {preset.name!r}: {name} must be a string, got {value!r}")


def channel_index(name: str) -> int:
    try:
        return CHANNELS[name.lower()]
    except KeyError as exc:
        raise ConfigurationError(
            f"Unknown channel {name!r}; expected one of {', '.join(CHANNELS)}"
        ) from exc


class PresetRegistry:
    _cache: Dict[Path, "PresetRegistry"] = {}

    def __init__(self, presets: Iterable[Preset]) -> None:
        self._presets = list(presets)

    @classmethod
    def load(cls, path: Path = DATA_PATH) -> "PresetRegistry":
        key = Path(path).resolve()
        cached = cls._cache.get(key)
        if cached:
            return cached
        try:
            raw = json.loads(key.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid preset file {key}: {exc}") from exc
        if not isinstance(raw, list):
            raise ConfigurationError(f"Preset file {key} must contain a JSON list of presets")
        registry = cls(Preset.from_dict(item) for item in raw)
        cls._cache[key] = registry
        return registry

    @property
    def presets(self) -> List[Preset]:
        return list(self._presets)

    def get(self, name: str) -> Optional[Preset]:
        for preset in self._presets:
            if preset.name == name:
                return preset
        return None

    def require(self, name: str) -> Preset:
        preset = self.get(name)
        if not preset:
            raise ConfigurationError(f"Unknown preset '{name}' (see --list-presets)")
        return preset
