import json

import pytest

from glyphpack.encoding import ChromaKeyMode, ChromaKeyPolicy, ThresholdPolicy, expected_size
from glyphpack.errors import ConfigurationError
from glyphpack.presets import Preset, PresetRegistry


def test_bundled_presets():
    registry = PresetRegistry.load()
    names = [preset.name for preset in registry.presets]
    assert names == ["legacy-font", "icons", "grid-96", "bitmap"]
    assert expected_size(registry.require("legacy-font").grid_spec()) == (96, 64)
    assert expected_size(registry.require("icons").grid_spec()) == (145, 145)
    assert expected_size(registry.require("grid-96").grid_spec()) == (96, 96)
    assert not registry.require("bitmap").is_tiled


def test_preset_policies():
    registry = PresetRegistry.load()
    assert registry.require("legacy-font").policy() == ThresholdPolicy(channel=0, value=255)
    assert registry.require("icons").policy() == ChromaKeyPolicy(ChromaKeyMode.EQUAL_IS_BACKGROUND)


def test_registry_is_cached():
    assert PresetRegistry.load() is PresetRegistry.load()


def test_unknown_preset():
    registry = PresetRegistry.load()
    assert registry.get("nope") is None
    with pytest.raises(ConfigurationError):
        registry.require("nope")


def test_custom_preset_file(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(
        json.dumps(
            [
                {
                    "name": "tiny",
                    "mode": "tiles",
                    "tile_width": 4,
                    "tile_height": 4,
                    "columns": 2,
                    "rows": 1,
                    "tile_count": 2,
                    "policy": "threshold",
                    "channel": "green",
                    "value": 0,
                }
            ]
        ),
        encoding="utf-8",
    )
    preset = PresetRegistry.load(path).require("tiny")
    assert preset.policy() == ThresholdPolicy(channel=1, value=0)
    assert expected_size(preset.grid_spec()) == (8, 4)


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "x", "mode": "spiral", "policy": "threshold"},
        {"name": "x", "mode": "tiles", "policy": "magic"},
        {"name": "x", "mode": "tiles", "policy": "threshold", "colour": "red"},
    ],
)
def test_invalid_preset_entries(raw):
    with pytest.raises(ConfigurationError):
        Preset.from_dict(raw)


def test_invalid_channel_and_chroma_mode():
    with pytest.raises(ConfigurationError):
        Preset.from_dict({"name": "x", "mode": "stride", "policy": "threshold", "channel": "cyan"}).policy()
    with pytest.raises(ConfigurationError):
        Preset.from_dict({"name": "x", "mode": "tiles", "policy": "chroma-key", "chroma_mode": "sometimes"}).policy()


def test_wide_tile_preset_fails_on_grid_spec():
    preset = Preset.from_dict(
        {"name": "wide", "mode": "tiles", "policy": "threshold", "tile_width": 12, "tile_height": 8, "columns": 1, "rows": 1}
    )
    with pytest.raises(ConfigurationError):
        preset.grid_spec()


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "x", "mode": "tiles", "policy": "threshold", "tile_width": "8"},
        {"name": "x", "mode": "tiles", "policy": "threshold", "margin": True},
        {"name": "x", "mode": "tiles", "policy": "threshold", "tile_count": 1.5},
        {"name": "x", "mode": "stride", "policy": "threshold", "channel": 0},
        ["name", "x"],
    ],
)
def test_wrongly_typed_preset_entries(raw):
    with pytest.raises(ConfigurationError):
        Preset.from_dict(raw)


def test_preset_file_must_be_a_list(tmp_path):
    path = tmp_path / "object.json"
    path.write_text('{"name": "x"}', encoding="utf-8")
    with pytest.raises(ConfigurationError):
        PresetRegistry.load(path)


def test_tile_count_is_optional():
    preset = Preset.from_dict({"name": "x", "mode": "tiles", "policy": "chroma-key"})
    assert preset.tile_count is None
