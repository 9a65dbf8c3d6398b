"""Parsing of window geometry strings such as ``300x5-30+20``."""

from __future__ import annotations

import re

from .options import Geometry

_INTEGER = re.compile(r"[+-]?[0-9]+")
_UINT_MASK = 0xFFFFFFFF


def _read_integer(text: str, pos: int) -> tuple[int, int] | None:
    match = _INTEGER.match(text, pos)
    if match is None:
        return None
    return int(match.group()), match.end()


def _parse_offset(text: str, pos: int) -> tuple[int, bool, int] | None:
    """Read a signed offset at ``pos``; return value, negativity and new position."""
    negative = text[pos] == "-"
    result = _read_integer(text, pos + 1)
    if result is None:
        return None
    value, pos = result
    return (-value if negative else value), negative, pos


def parse_geometry(text: str) -> Geometry:
    """Parse ``[-][=][W][xH][{+-}X{+-}Y]`` into a :class:`Geometry`.

    A leading ``-`` marks a width measured from the right. A malformed string
    yields a geometry with nothing set.
    """
    geometry = Geometry()
    if text.startswith("-"):
        geometry.negative_width = True
        text = text[1:]

    width = height = x = y = None
    negative_x = negative_y = False
    pos = 0
    if text[pos:pos + 1] == "=":
        pos += 1

    if pos < len(text) and text[pos] not in "+-x":
        result = _read_integer(text, pos)
        if result is None:
            return Geometry(negative_width=geometry.negative_width)
        width, pos = result

    if pos < len(text) and text[pos] in "xX":
        result = _read_integer(text, pos + 1)
        if result is None:
            return Geometry(negative_width=geometry.negative_width)
        height, pos = result

    if pos < len(text) and text[pos] in "+-":
        offset = _parse_offset(text, pos)
        if offset is None:
            return Geometry(negative_width=geometry.negative_width)
        x, negative_x, pos = offset
        if pos < len(text) and text[pos] in "+-":
            offset = _parse_offset(text, pos)
            if offset is None:
                return Geometry(negative_width=geometry.negative_width)
            y, negative_y, pos = offset

    if pos != len(text):
        return Geometry(negative_width=geometry.negative_width)

    if width is not None:
        geometry.w = width & _UINT_MASK
        geometry.width_set = True
    if height is not None:
        geometry.h = height & _UINT_MASK
    if x is not None:
        geometry.x = x
        geometry.negative_x = negative_x
    if y is not None:
        geometry.y = y
        geometry.negative_y = negative_y
    return geometry