"""Mapping of mouse clicks on the notification window to actions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .options import MouseAction, Settings

log = logging.getLogger(__name__)

_BUTTON_ATTRIBUTES = {
    1: "mouse_left_click",
    2: "mouse_middle_click",
    3: "mouse_right_click",
}


def click_action(button: int, settings: Settings) -> MouseAction | None:
    """Return the configured action for a mouse button.

    Buttons 1, 2 and 3 are the left, middle and right buttons. Any other
    button is unsupported and gives ``None``.
    """
    attribute = _BUTTON_ATTRIBUTES.get(button)
    if attribute is None:
        log.warning("Unsupported mouse button: '%d'", button)
        return None
    return getattr(settings, attribute)


def notification_at(
    y: int,
    heights: Sequence[int],
    separator_height: int,
    frame_width: int,
) -> int | None:
    """Return the index of the displayed notification under vertical position ``y``.

    ``heights`` holds the displayed height of each notification, top to
    bottom. Both edges of a notification are outside it. When no
    notification contains ``y`` the last one is chosen; with no
    notifications the result is ``None``.
    """
    if not heights:
        return None
    top = separator_height
    for index, height in enumerate(heights):
        if top < y < top + height:
            return index
        top += height + separator_height + frame_width
    return len(heights) - 1