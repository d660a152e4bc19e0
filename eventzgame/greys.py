"""Numbered grey levels (``gray0`` … ``gray100`` and ``grey0`` … ``grey100``).

These are the percentage greys of the classic colour-name table. Each level
is stored as one byte that is repeated across the red, green and blue
channels.
"""

from __future__ import annotations

from functools import lru_cache

_LEVEL_BYTES: tuple[int, ...] = (
    0x00, 0x03, 0x05, 0x08, 0x0A, 0x0D, 0x0F, 0x12, 0x14, 0x17,
    0x1A, 0x1C, 0x1F, 0x21, 0x24, 0x26, 0x29, 0x2B, 0x2E, 0x30,
    0x33, 0x36, 0x38, 0x3B, 0x3D, 0x40, 0x42, 0x45, 0x47, 0x4A,
    0x4D, 0x4F, 0x52, 0x54, 0x57, 0x59, 0x5C, 0x5E, 0x61, 0x63,
    0x66, 0x69, 0x6B, 0x6E, 0x70, 0x73, 0x75, 0x78, 0x7A, 0x7D,
    0x7F, 0x82, 0x85, 0x87, 0x8A, 0x8C, 0x8F, 0x91, 0x94, 0x96,
    0x99, 0x9C, 0x9E, 0xA1, 0xA3, 0xA6, 0xA8, 0xAB, 0xAD, 0xB0,
    0xB3, 0xB5, 0xB8, 0xBA, 0xBD, 0xBF, 0xC2, 0xC4, 0xC7, 0xC9,
    0xCC, 0xCF, 0xD1, 0xD4, 0xD6, 0xD9, 0xDB, 0xDE, 0xE0, 0xE3,
    0xE5, 0xE8, 0xEB, 0xED, 0xF0, 0xF2, 0xF5, 0xF7, 0xFA, 0xFC,
    0xFF,
)

_SPELLINGS = ("gray", "grey")


def _rgb(level_byte: int) -> int:
    return level_byte * 0x010101


@lru_cache(maxsize=1)
def _table() -> dict[str, int]:
    entries = {
        f"{spelling}{level}": _rgb(value)
        for spelling in _SPELLINGS
        for level, value in enumerate(_LEVEL_BYTES)
    }
    # Keep the same order as the colour-name table: plain lexical order.
    return {name: entries[name] for name in sorted(entries)}


def grey_levels() -> dict[str, int]:
    """Return every numbered grey as ``name -> 0xRRGGBB``, in table order."""
    return dict(_table())


def grey_level(name: str) -> int:
    """Return the ``0xRRGGBB`` value of a numbered grey such as ``"gray50"``.

    The lookup ignores case. Unknown names raise :class:`KeyError`.
    """
    key = name.strip().lower()
    try:
        return _table()[key]
    except KeyError:
        raise KeyError(f"unknown grey level: {name!r}") from None