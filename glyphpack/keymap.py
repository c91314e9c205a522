"""Keyboard layout compiler.

Each non-comment line of the source table is tab-separated::

    scancode <TAB> name [<TAB> lower [<TAB> upper [<TAB> graph]]]

Characters are written literally or as ``\\XX`` hex escapes. The output is a
fixed table of 128 four-byte entries; byte 0 of each entry is reserved.
"""
from __future__ import annotations

from typing import Iterable

from .errors import KeymapError

KEYMAP_ENTRIES = 128
ENTRY_SIZE = 4
MIN_FIELDS = 2
MAX_FIELDS = 5


def key_to_byte(token: str) -> int:
    if len(token) > 1 and token[0] == "\\":
        try:
            value = int(token[1:], 16)
        except ValueError as exc:
            raise KeymapError(f"Invalid hex escape: {token!r}") from exc
        if not 0 <= value <= 0xFF:
            raise KeymapError(f"Hex escape out of byte range: {token!r}")
        return value
    try:
        encoded = token.encode("ascii")
    except UnicodeEncodeError as exc:
        raise KeymapError(f"Character is not ASCII: {token!r}") from exc
    if len(encoded) != 1:
        raise KeymapError(f"Expected a single character, got {token!r}")
    return encoded[0]


def parse_keymap(lines: Iterable[str]) -> bytes:
    keymap = bytearray(KEYMAP_ENTRIES * ENTRY_SIZE)
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        parts = line.split("\t")
        if not MIN_FIELDS <= len(parts) <= MAX_FIELDS:
            raise KeymapError(
                f"Expected {MIN_FIELDS}-{MAX_FIELDS} tab-separated fields, got {len(parts)}",
                line_number,
                line,
            )
        if len(parts) == MIN_FIELDS:
            continue
        try:
            index = int(parts[0])
        except ValueError as exc:
            raise KeymapError(f"Invalid scancode: {parts[0]!r}", line_number, line) from exc
        if not 0 <= index < KEYMAP_ENTRIES:
            raise KeymapError(f"Scancode {index} out of range 0-{KEYMAP_ENTRIES - 1}", line_number, line)
        lower = parts[2]
        upper = parts[3] if len(parts) >= 4 else lower
        graph = parts[4] if len(parts) >= 5 else lower
        offset = ENTRY_SIZE * index
        try:
            keymap[offset + 1] = key_to_byte(lower)
            keymap[offset + 2] = key_to_byte(upper)
            keymap[offset + 3] = key_to_byte(graph)
        except KeymapError as exc:
            raise KeymapError(str(exc), line_number, line) from exc
    return bytes(keymap)


def compile_keymap_file(path: str) -> bytes:
    with open(path, "r", encoding="utf-8-sig") as handle:
        return parse_keymap(handle)
