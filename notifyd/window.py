"""Window property values: opacity and the shape of rounded corners."""

from __future__ import annotations

_OPAQUE = 0xFFFFFFFF
_MAX_TRANSPARENCY = 100


def opacity_value(transparency: int) -> int:
    """Return the ``_NET_WM_WINDOW_OPACITY`` value for a transparency percentage.

    Values outside 0..100 are treated as fully transparent.
    """
    if not 0 <= transparency <= _MAX_TRANSPARENCY:
        transparency = _MAX_TRANSPARENCY
    return (_MAX_TRANSPARENCY - transparency) * (_OPAQUE // _MAX_TRANSPARENCY)


def corner_centers(width: int, height: int, radius: int) -> list[tuple[int, int]]:
    """Return the top-left corners of the bounding boxes of the four corner circles.

    The order is top-left, top-right, bottom-left, bottom-right. Each circle
    has a diameter of twice ``radius``.
    """
    diameter = 2 * radius
    right = width - diameter - 1
    bottom = height - diameter - 1
    return [(0, 0), (right, 0), (0, bottom), (right, bottom)]