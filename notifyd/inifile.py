"""Configuration lookup across an ini file and command-line flags."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TextIO

from .utils import string_to_path, string_to_time, strip_quotes

log = logging.getLogger(__name__)

_TRUE_WORDS = frozenset({"true", "yes", "on", "1", "y", "t"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", "n", "f"})
_COMMENT_CHARS = "#;"


def _parse_value(raw: str, lineno: int) -> str:
    """Strip trailing comments from an unquoted value or unwrap a quoted one."""
    raw = raw.strip()
    if raw.startswith('"'):
        closing = raw.find('"', 1)
        if closing == -1:
            raise ValueError(f"line {lineno}: unterminated quote")
        return strip_quotes(raw[: closing + 1])
    for index, char in enumerate(raw):
        if char in _COMMENT_CHARS:
            return raw[:index].rstrip()
    return raw


def _parse_ini(lines: Iterable[str]) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    current: dict[str, str] | None = None
    for lineno, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text[0] in _COMMENT_CHARS:
            continue
        if text.startswith("["):
            closing = text.find("]")
            if closing == -1:
                raise ValueError(f"line {lineno}: missing ']' in section header")
            name = text[1:closing].strip()
            current = sections.setdefault(name, {})
            continue
        key, sep, value = text.partition("=")
        if not sep:
            log.warning("Invalid key/value in line %d: '%s'", lineno, text)
            continue
        if current is None:
            raise ValueError(f"line {lineno}: key outside of any section")
        current[key.strip()] = _parse_value(value, lineno)
    return sections


class Options:
    """Looks up settings on the command line first, then in the ini sections."""

    def __init__(
        self,
        sections: Mapping[str, Mapping[str, str]] | None = None,
        argv: Sequence[str] | None = None,
    ) -> None:
        self._sections = {name: dict(values) for name, values in (sections or {}).items()}
        self._argv = list(argv or [])

    @classmethod
    def from_file(cls, stream: TextIO | None, argv: Sequence[str] | None = None) -> Options:
        """Read ini sections from ``stream``; ``None`` gives an empty configuration."""
        sections = _parse_ini(stream) if stream is not None else {}
        return cls(sections, argv)

    def sections(self) -> Iterator[str]:
        """Yield section names in the order they first appeared."""
        yield from self._sections

    def is_set(self, section: str, key: str) -> bool:
        return key in self._sections.get(section, {})

    def _find_flag(self, flag: str | None) -> int | None:
        if not flag:
            return None
        for alternative in flag.split("/"):
            try:
                return self._argv.index(alternative)
            except ValueError:
                continue
        return None

    def cmdline_is_set(self, flag: str | None) -> bool:
        return self._find_flag(flag) is not None

    def _cmdline_value(self, flag: str | None) -> str | None:
        index = self._find_flag(flag)
        if index is None:
            return None
        if index + 1 >= len(self._argv):
            log.warning("%s: Missing argument. Ignoring.", flag)
            return None
        return self._argv[index + 1]

    def _lookup(self, section: str, key: str, flag: str | None) -> str | None:
        value = self._cmdline_value(flag)
        if value is not None:
            return value
        return self._sections.get(section, {}).get(key)

    def get_string(
        self, section: str, key: str, flag: str | None = None, default: str | None = None
    ) -> str | None:
        value = self._lookup(section, key, flag)
        return default if value is None else value

    def get_path(
        self, section: str, key: str, flag: str | None = None, default: str | None = None
    ) -> str | None:
        return string_to_path(self.get_string(section, key, flag, default))

    def get_int(self, section: str, key: str, flag: str | None = None, default: int = 0) -> int:
        value = self._lookup(section, key, flag)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            log.warning("Invalid integer for '%s': '%s'", key, value)
            return default

    def get_bool(
        self, section: str, key: str, flag: str | None = None, default: bool = False
    ) -> bool:
        if self.cmdline_is_set(flag):
            return True
        value = self._sections.get(section, {}).get(key)
        if value is None:
            return default
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        log.warning("Invalid boolean for '%s': '%s'", key, value)
        return default

    def get_time(self, section: str, key: str, flag: str | None = None, default: int = 0) -> int:
        value = self._lookup(section, key, flag)
        if value is None:
            return default
        return string_to_time(value)