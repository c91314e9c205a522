from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .build import AssetBuilder, BuildSettings
from .presets import DATA_PATH, PRESETS_ENV_VAR, PresetRegistry

DEFAULT_PRESET = "icons"


def parse_tile_size(value: str) -> Tuple[int, int]:
    try:
        width, height = value.lower().split("x", 1)
        return int(width), int(height)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected WIDTHxHEIGHT, got {value!r}") from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="glyphpack: compile font sheets, bitmaps and keyboard maps into kernel blobs."
    )
    parser.add_argument("input", nargs="?", help="Source asset (.png/.bmp/.gif/.jpg for images, .txt/.tsv for keymaps)")
    parser.add_argument("output", nargs="?", help="Destination binary file")
    parser.add_argument("--preset", default=DEFAULT_PRESET, help=f"Image preset (default: {DEFAULT_PRESET})")
    parser.add_argument(
        "--presets",
        metavar="PATH",
        default=os.environ.get(PRESETS_ENV_VAR),
        help=f"Preset JSON file (default: ${PRESETS_ENV_VAR} or the bundled presets)",
    )
    parser.add_argument("--list-presets", action="store_true", help="List known presets and exit")
    parser.add_argument("--tile-size", type=parse_tile_size, metavar="WxH", help="Override tile size")
    parser.add_argument("--columns", type=int, help="Override tiles per row")
    parser.add_argument("--rows", type=int, help="Override tile rows")
    parser.add_argument("--margin", type=int, help="Override outer margin in pixels")
    parser.add_argument("--padding", type=int, help="Override padding between tiles in pixels")
    parser.add_argument("--count", type=int, help="Override number of tiles to encode")
    parser.add_argument("--channel", choices=("red", "green", "blue", "alpha"), help="Threshold channel")
    parser.add_argument("--value", type=int, help="Threshold channel value that counts as set")
    parser.add_argument("--invert", action="store_true", help="Treat pixels matching the chroma key as set")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print a summary")
    return parser.parse_args(argv)


def load_registry(path: Optional[str]) -> PresetRegistry:
    return PresetRegistry.load(Path(path) if path else DATA_PATH)


def list_presets(registry: PresetRegistry) -> int:
    for preset in registry.presets:
        if preset.description:
            print(f"{preset.name}: {preset.description}")
        else:
            print(preset.name)
    return 0


def build_settings(args: argparse.Namespace) -> BuildSettings:
    settings = BuildSettings(
        columns=args.columns,
        rows=args.rows,
        margin=args.margin,
        padding=args.padding,
        tile_count=args.count,
        invert=args.invert,
        channel=args.channel,
        value=args.value,
    )
    if args.tile_size:
        settings.tile_width, settings.tile_height = args.tile_size
    return settings


def compile_asset(args: argparse.Namespace) -> int:
    registry = load_registry(args.presets)
    preset = registry.require(args.preset)
    builder = AssetBuilder(preset, build_settings(args))
    data = builder.build_from_file(args.input)
    Path(args.output).write_bytes(data)
    if not args.quiet:
        print(f"Wrote {len(data)} bytes to {args.output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        if args.list_presets:
            return list_presets(load_registry(args.presets))
        if not args.input or not args.output:
            print("Missing input or output path. Use --help for usage.", file=sys.stderr)
            return 2
        return compile_asset(args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
