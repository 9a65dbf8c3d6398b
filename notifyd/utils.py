"""String and time helpers shared across the notification daemon."""

from __future__ import annotations

import logging
import os
import re
import time

log = logging.getLogger(__name__)

_C_SPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_UNIT_SECONDS = (
    ("s", 1),
    ("m", 60),
    ("h", 60 * 60),
    ("d", 60 * 60 * 24),
)


def seconds_to_us(seconds: int) -> int:
    """Convert whole seconds into the internal microsecond representation."""
    return int(seconds) * 1000 * 1000


def string_replace_at(buf: str, pos: int, length: int, repl: str) -> str:
    """Return ``buf`` with ``length`` characters at ``pos`` replaced by ``repl``."""
    return buf[:pos] + repl + buf[pos + length:]


def string_replace_all(needle: str, replacement: str, haystack: str | None) -> str | None:
    """Replace every occurrence of ``needle`` in ``haystack``, scanning left to right.

    Replaced text is never searched again. ``None`` passes through unchanged.
    """
    if haystack is None:
        return None
    if not needle:
        return haystack

    pieces = []
    start = 0
    while (found := haystack.find(needle, start)) != -1:
        pieces.append(haystack[start:found])
        pieces.append(replacement)
        start = found + len(needle)
    pieces.append(haystack[start:])
    return "".join(pieces)


def string_append(a: str | None, b: str | None, sep: str | None = None) -> str | None:
    """Join ``a`` and ``b``; ``sep`` goes between them only when both are non-empty."""
    if not a:
        return b
    if not b:
        return a
    return a + (sep or "") + b


def strip_quotes(value: str | None) -> str | None:
    """Remove one pair of surrounding double quotes, leaving inner quotes alone."""
    if value is None:
        return None
    if value and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def strip_delimited(text: str, start: str, end: str) -> str:
    """Remove every span opened by ``start`` and closed by ``end``, nesting aware."""
    kept = []
    depth = 0
    for char in text:
        if char == start:
            depth += 1
        elif char == end and depth > 0:
            depth -= 1
        elif depth == 0:
            kept.append(char)
    return "".join(kept)


def string_to_path(text: str | None) -> str | None:
    """Expand a leading ``~/`` to the user's home directory."""
    if text is not None and text.startswith("~/"):
        home = os.environ.get("HOME", "")
        return string_replace_at(text, 0, 2, home + "/")
    return text


def string_to_time(text: str) -> int:
    """Parse a duration such as ``10``, ``500ms``, ``2m`` into microseconds.

    Without a unit the value is taken as seconds. Unparsable input yields 0.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        log.warning("Time: '%s': No digits found.", text)
        return 0

    value = int(match.group(1))
    if not _INT64_MIN <= value <= _INT64_MAX:
        log.warning("Time: '%s': Numerical result out of range.", text)
        return 0

    rest = text[match.end():]
    if not rest:
        return seconds_to_us(value)

    rest = rest.lstrip(_C_SPACE)
    if rest.startswith("ms"):
        return value * 1000
    for unit, factor in _UNIT_SECONDS:
        if rest.startswith(unit):
            return seconds_to_us(value) * factor
    return 0


def time_monotonic_now() -> int:
    """Return a monotonic timestamp in microseconds that keeps counting during sleep."""
    clock = getattr(time, "CLOCK_BOOTTIME", None)
    if clock is None:
        clock = getattr(time, "CLOCK_MONOTONIC", None)
    if clock is None:
        return time.monotonic_ns() // 1000
    return time.clock_gettime_ns(clock) // 1000