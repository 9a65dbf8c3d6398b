"""Monitor geometry, DPI calculation and active-screen selection."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .options import FollowMode, Settings

_MM_PER_INCH = 25.4
_FULLSCREEN_ATOM = "_NET_WM_STATE_FULLSCREEN"
_LEADING_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def in_rect(x: int, y: int, rx: int, ry: int, rw: int, rh: int) -> bool:
    """Tell whether the point lies in the rectangle; right and bottom edges are outside."""
    return rx <= x < rx + rw and ry <= y < ry + rh


@dataclass
class ScreenInfo:
    """A monitor's position and size in pixels, and its physical height in mm."""

    id: int = 0
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    mmh: int = 0

    def contains(self, x: int, y: int) -> bool:
        """Tell whether the point lies on this screen."""
        return in_rect(x, y, self.x, self.y, self.w, self.h)

    def monitor_dpi(self) -> float:
        """Return the DPI derived from the pixel and physical height."""
        if self.mmh == 0:
            raise ValueError(f"screen {self.id} reports no physical height")
        return self.h * _MM_PER_INCH / self.mmh


def parse_xft_dpi(value: str | None) -> float:
    """Read the leading number of an ``Xft.dpi`` resource; 0 when there is none."""
    if value is None:
        return 0.0
    match = _LEADING_FLOAT.match(value)
    if match is None:
        return 0.0
    return float(match.group(1))


def screen_dpi(
    screen: ScreenInfo,
    settings: Settings,
    xft_dpi: float | None,
    root_width: int,
    root_width_mm: int,
) -> float:
    """Choose the DPI for ``screen``.

    Per-monitor DPI wins when enabled and Xinerama is not forced; otherwise a
    positive ``Xft.dpi`` value; otherwise the DPI of the whole root screen.
    """
    if not settings.force_xinerama and settings.per_monitor_dpi:
        return screen.monitor_dpi()
    if xft_dpi is not None and xft_dpi > 0:
        return xft_dpi
    if root_width_mm == 0:
        raise ValueError("root screen reports no physical width")
    return root_width * _MM_PER_INCH / root_width_mm


def select_active_screen(
    screens: Sequence[ScreenInfo],
    settings: Settings,
    pointer: tuple[int, int] | None,
    default_index: int = 0,
) -> ScreenInfo:
    """Pick the screen notifications are shown on.

    A configured monitor in range wins. Without follow mode the default screen
    is used. With follow mode, ``pointer`` holds the mouse position or the
    focused window's origin; ``None`` means it could not be found. When no
    screen past the first contains the point, the default screen is used.
    """
    if not screens:
        raise ValueError("no screens available")
    if 0 < settings.monitor < len(screens):
        return screens[settings.monitor]

    index = default_index
    if settings.f_mode is not FollowMode.NONE and pointer is not None:
        x, y = pointer
        found = 0
        for position, screen in enumerate(screens):
            if screen.contains(x, y):
                found = position
        if found > 0:
            index = found

    if not 0 <= index < len(screens):
        raise IndexError(f"screen index {index} out of range")
    return screens[index]


def is_fullscreen_state(atom_names: Iterable[str | None]) -> bool:
    """Tell whether a window's ``_NET_WM_STATE`` atom names include fullscreen."""
    return any(name == _FULLSCREEN_ATOM for name in atom_names if name)