"""Reader for XPMv3 images.

Supported: the XPMv3 format, with these limits:

* hotspot coordinates are ignored;
* only ``#rgb``, ``#rrggbb`` and ``#rrrrggggbbbb`` values and the colour names
  of :mod:`eventzgame.colornames` are recognised;
* symbolic (``s``) colour keys are skipped.

Images with at most 256 colours are read as indexed images with a palette;
larger ones hold ``0xRRGGBB`` pixel values directly. A colour named ``None``
becomes the image's colour key.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Iterator

from eventzgame.colornames import TRANSPARENT, lookup_color

STARTING_HASH_SIZE = 256
MAGIC = b"/* XPM */"

_SPACE = frozenset(" \t\n\v\f\r")
_HEADER = re.compile(r"\s*([+-]?\d+)\s*([+-]?\d+)\s*([+-]?\d+)\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"[0-9a-fA-F]*")


class XPMError(Exception):
    """Raised when XPM data cannot be read."""


def hash_key(key: str, size: int) -> int:
    """Hash a pixel key into a table of ``size`` buckets (a power of two)."""
    value = 0
    for char in key:
        value = value * 33 + ord(char)
    return value & (size - 1)


class ColorHash:
    """Maps pixel keys to colours, with a power-of-two bucket table."""

    def __init__(self, maxnum: int) -> None:
        size = STARTING_HASH_SIZE
        while size < maxnum:
            size <<= 1
        self.size = size
        self.maxnum = maxnum
        self._count = 0
        self._table: list[list[tuple[str, int]]] = [[] for _ in range(size)]

    def add(self, key: str, color: int) -> None:
        """Store ``color`` under ``key``; a later entry shadows an earlier one."""
        if self._count >= self.maxnum:
            raise XPMError("colour table is full")
        self._table[hash_key(key, self.size)].insert(0, (key, color))
        self._count += 1

    def get(self, key: str) -> int:
        """Return the colour stored under ``key``, or 0 if there is none."""
        for entry_key, color in self._table[hash_key(key, self.size)]:
            if entry_key == key:
                return color
        return 0

    def __len__(self) -> int:
        return self._count


def _hex_value(digits: str) -> int:
    prefix = _HEX_PREFIX.match(digits).group(0)
    return int(prefix, 16) if prefix else 0


def color_to_rgb(spec: str, extended: bool = False) -> int | None:
    """Convert a colour value to ``0xRRGGBB``.

    Returns ``0xFFFFFFFF`` for the transparent colour and ``None`` for an
    unknown name. A ``#`` value of unsupported length raises :class:`XPMError`.
    """
    if spec.startswith("#"):
        if len(spec) == 4:
            digits = "".join(ch * 2 for ch in spec[1:4])
        elif len(spec) == 7:
            digits = spec[1:7]
        elif len(spec) == 13:
            digits = spec[1:3] + spec[5:7] + spec[9:11]
        else:
            raise XPMError(f"unsupported colour value: {spec!r}")
        return _hex_value(digits)
    try:
        return lookup_color(spec, extended)
    except KeyError:
        return None


@dataclass
class XPMImage:
    """A decoded XPM image.

    ``pixels`` holds one row per line; each value is a palette index for an
    indexed image and a ``0xRRGGBB`` value otherwise.
    """

    width: int
    height: int
    indexed: bool
    palette: list[int] = field(default_factory=list)
    pixels: list[list[int]] = field(default_factory=list)
    colorkey: int | None = None

    def pixel_rgb(self, x: int, y: int) -> int:
        """Return the ``0xRRGGBB`` colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        value = self.pixels[y][x]
        if self.indexed:
            return self.palette[value]
        return value & 0xFFFFFF


class _ArrayLines:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)

    def next_line(self, length: int = 0) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise XPMError("Premature end of data") from None


class _StreamLines:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _read_byte(self) -> bytes:
        byte = self._stream.read(1)
        if not byte:
            raise XPMError("Premature end of data")
        return byte

    def next_line(self, length: int = 0) -> str:
        while self._read_byte() != b'"':
            pass
        if length:
            # The row, its closing quote, the comma and the line break.
            wanted = length + 3
            chunk = self._stream.read(wanted)
            if len(chunk) < wanted:
                raise XPMError("Premature end of data")
            return chunk[:length].decode("latin-1")
        collected = bytearray()
        while (byte := self._read_byte()) != b'"':
            collected += byte
        return collected.decode("latin-1")


def _skip(line: str, pos: int, space: bool) -> int:
    while pos < len(line) and (line[pos] in _SPACE) == space:
        pos += 1
    return pos


def _parse_header(line: str) -> tuple[int, int, int, int]:
    match = _HEADER.match(line)
    if not match:
        raise XPMError("Invalid format description")
    width, height, ncolors, cpp = (int(group) for group in match.groups())
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XPMError("Invalid format description")
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int, extended: bool) -> int:
    pos = cpp + 1
    while True:
        pos = _skip(line, pos, space=True)
        if pos >= len(line):
            raise XPMError("colour parse error")
        nametype = line[pos]
        pos = _skip(line, pos, space=False)
        pos = _skip(line, pos, space=True)
        start = pos
        pos = _skip(line, pos, space=False)
        if nametype == "s":
            continue
        rgb = color_to_rgb(line[start:pos], extended)
        if rgb is not None:
            return rgb


def _decode(source: _ArrayLines | _StreamLines, extended: bool) -> XPMImage:
    width, height, ncolors, cpp = _parse_header(source.next_line())
    indexed = ncolors <= 256
    image = XPMImage(width=width, height=height, indexed=indexed)
    colors = ColorHash(ncolors)

    for index in range(ncolors):
        line = source.next_line()
        rgb = _parse_color_line(line, cpp, extended)
        if indexed:
            image.palette.append(rgb & 0xFFFFFF)
            pixel = index
        else:
            pixel = rgb
        colors.add(line[:cpp], pixel)
        if rgb == TRANSPARENT:
            image.colorkey = pixel

    row_length = width * cpp
    for _ in range(height):
        line = source.next_line(row_length)
        image.pixels.append(
            [colors.get(line[x * cpp:(x + 1) * cpp]) for x in range(width)]
        )
    return image


def is_xpm(stream: BinaryIO | None) -> bool:
    """Tell whether ``stream`` starts with the XPM magic comment.

    The stream position is left unchanged.
    """
    if stream is None:
        return False
    start = stream.tell()
    try:
        return stream.read(len(MAGIC)) == MAGIC
    finally:
        stream.seek(start)


def load_xpm(stream: BinaryIO | None, extended: bool = False) -> XPMImage:
    """Read an XPM image from a binary stream.

    On failure the stream is moved back to where reading began and
    :class:`XPMError` is raised.
    """
    if stream is None:
        raise XPMError("no data source")
    start = stream.tell()
    try:
        return _decode(_StreamLines(stream), extended)
    except XPMError:
        stream.seek(start)
        raise


def read_xpm_from_array(lines: Iterable[str] | None, extended: bool = False) -> XPMImage:
    """Read an XPM image from its strings, as embedded in source code."""
    if lines is None:
        raise XPMError("array is NULL")
    return _decode(_ArrayLines(lines), extended)