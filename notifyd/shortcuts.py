"""Parsing of keyboard shortcut strings such as ``ctrl+shift+space``."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


class Modifier(enum.IntFlag):
    """Modifier key masks as used in key event states."""

    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7


_MODIFIER_NAMES = {
    "ctrl": Modifier.CONTROL,
    "mod4": Modifier.MOD4,
    "mod3": Modifier.MOD3,
    "mod2": Modifier.MOD2,
    "mod1": Modifier.MOD1,
    "shift": Modifier.SHIFT,
}


@dataclass(frozen=True)
class ParsedShortcut:
    """The modifier mask and key name of a shortcut."""

    modifiers: Modifier
    key: str


def modifier_mask(name: str) -> Modifier:
    """Return the mask for a modifier name; unknown names give no modifier."""
    mask = _MODIFIER_NAMES.get(name)
    if mask is None:
        log.warning("Unknown Modifier: '%s'", name)
        return Modifier.NONE
    return mask


def parse_shortcut(text: str | None) -> ParsedShortcut | None:
    """Split ``mod+mod+key`` into a modifier mask and key name.

    ``none`` or an empty string disable the shortcut and give ``None``.
    A shortcut without a key raises :class:`ValueError`.
    """
    if text is None or text in ("none", ""):
        return None
    *modifier_names, key = text.split("+")
    modifiers = Modifier.NONE
    for name in modifier_names:
        modifiers |= modifier_mask(name.rstrip())
    key = key.strip()
    if not key:
        raise ValueError(f"Unknown keyboard shortcut: '{text}'")
    return ParsedShortcut(modifiers, key)