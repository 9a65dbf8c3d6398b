"""Option types, enumerations and compiled-in defaults."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TypeVar

from .utils import seconds_to_us


class Alignment(enum.Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class Ellipsize(enum.Enum):
    START = 0
    MIDDLE = 1
    END = 2


class IconPosition(enum.Enum):
    LEFT = 0
    RIGHT = 1
    OFF = 2


class SeparatorColorType(enum.Enum):
    FOREGROUND = 0
    AUTO = 1
    FRAME = 2
    CUSTOM = 3


class FollowMode(enum.Enum):
    NONE = 0
    MOUSE = 1
    KEYBOARD = 2


class MouseAction(enum.Enum):
    NONE = 0
    DO_ACTION = 1
    CLOSE_CURRENT = 2
    CLOSE_ALL = 3


class MarkupMode(enum.Enum):
    NO = 1
    STRIP = 2
    FULL = 3


class Urgency(enum.IntEnum):
    LOW = 0
    NORMAL = 1
    CRITICAL = 2


class Fullscreen(enum.Enum):
    DELAY = 1
    PUSHBACK = 2
    SHOW = 3


E = TypeVar("E", bound=enum.Enum)


def parse_choice(enum_cls: type[E], value: str | None) -> E:
    """Map a configuration word such as ``close_all`` onto a member of ``enum_cls``."""
    if value is None:
        raise ValueError(f"no value given for {enum_cls.__name__}")
    for member in enum_cls:
        if member.name.lower() == value:
            return member
    raise ValueError(f"unknown {enum_cls.__name__} value: {value!r}")


@dataclass
class SeparatorColor:
    type: SeparatorColorType
    color: str | None = None


def parse_separator_color(value: str | None) -> SeparatorColor:
    """Parse ``auto``, ``foreground``, ``frame`` or a custom colour string."""
    try:
        kind = parse_choice(SeparatorColorType, value)
    except ValueError:
        if not value:
            raise ValueError(
                "Separator color is empty, make sure to quote the value."
            ) from None
        return SeparatorColor(SeparatorColorType.CUSTOM, value)
    return SeparatorColor(kind)


@dataclass
class Geometry:
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    negative_x: bool = False
    negative_y: bool = False
    negative_width: bool = False
    width_set: bool = False


@dataclass
class Colors:
    fg: str | None = None
    bg: str | None = None
    frame: str | None = None


@dataclass
class KeyboardShortcut:
    text: str | None = "none"
    code: int = 0
    sym: int = 0
    mask: int = 0
    is_valid: bool = False


@dataclass
class Rule:
    """A named set of match conditions and the changes applied on a match."""

    name: str | None = None
    appname: str | None = None
    summary: str | None = None
    body: str | None = None
    icon: str | None = None
    category: str | None = None
    stack_tag: str | None = None
    desktop_entry: str | None = None
    msg_urgency: Urgency | None = None
    timeout: int | None = None
    urgency: Urgency | None = None
    markup: MarkupMode | None = None
    history_ignore: bool | None = None
    match_transient: bool | None = None
    set_transient: bool | None = None
    skip_display: bool | None = None
    new_icon: str | None = None
    fg: str | None = None
    bg: str | None = None
    fc: str | None = None
    format: str | None = None
    script: str | None = None
    set_stack_tag: str | None = None
    fullscreen: Fullscreen | None = None


def _default_timeouts() -> dict[Urgency, int]:
    return {
        Urgency.LOW: seconds_to_us(10),
        Urgency.NORMAL: seconds_to_us(10),
        Urgency.CRITICAL: seconds_to_us(0),
    }


def _default_icons() -> dict[Urgency, str]:
    return {
        Urgency.LOW: "dialog-information",
        Urgency.NORMAL: "dialog-information",
        Urgency.CRITICAL: "dialog-warning",
    }


@dataclass
class Settings:
    """Every configurable value, initialised to the compiled-in defaults."""

    print_notifications: bool = False
    per_monitor_dpi: bool = False
    markup: MarkupMode | None = MarkupMode.NO
    stack_duplicates: bool = False
    hide_duplicate_count: bool = False
    font: str = "-*-terminus-medium-r-*-*-16-*-*-*-*-*-*-*"
    colors_low: Colors = field(default_factory=lambda: Colors(fg="#000000", bg="#aaaaff"))
    colors_norm: Colors = field(default_factory=lambda: Colors(fg="#DDDDDD", bg="#1793D1"))
    colors_crit: Colors = field(default_factory=lambda: Colors(fg="#000000", bg="#ffaaaa"))
    format: str = "%s %b"
    timeouts: dict[Urgency, int] = field(default_factory=_default_timeouts)
    icons: dict[Urgency, str] = field(default_factory=_default_icons)
    transparency: int = 0
    geometry: Geometry = field(default_factory=Geometry)
    title: str = "Dunst"
    window_class: str = "Dunst"
    shrink: bool = False
    sort: bool = True
    indicate_hidden: bool = True
    idle_threshold: int = 0
    show_age_threshold: int = -1
    align: Alignment = Alignment.LEFT
    sticky_history: bool = True
    history_length: int = 20
    show_indicators: bool = True
    word_wrap: bool = False
    ellipsize: Ellipsize = Ellipsize.MIDDLE
    ignore_newline: bool = False
    line_height: int = 0
    notification_height: int = 0
    separator_height: int = 2
    padding: int = 0
    h_padding: int = 0
    sep_color: SeparatorColor = field(
        default_factory=lambda: SeparatorColor(SeparatorColorType.AUTO)
    )
    frame_width: int = 0
    frame_color: str | None = "#888888"
    startup_notification: bool = False
    monitor: int = 0
    dmenu: str = "/usr/bin/dmenu"
    dmenu_cmd: list[str] | None = None
    browser: str = "/usr/bin/firefox"
    browser_cmd: list[str] | None = None
    icon_position: IconPosition = IconPosition.LEFT
    max_icon_size: int = 0
    icon_path: str | None = (
        "/usr/share/icons/gnome/16x16/status/:/usr/share/icons/gnome/16x16/devices/"
    )
    f_mode: FollowMode = FollowMode.NONE
    always_run_script: bool = False
    close_ks: KeyboardShortcut = field(default_factory=KeyboardShortcut)
    close_all_ks: KeyboardShortcut = field(default_factory=KeyboardShortcut)
    history_ks: KeyboardShortcut = field(default_factory=KeyboardShortcut)
    context_ks: KeyboardShortcut = field(default_factory=KeyboardShortcut)
    force_xinerama: bool = False
    corner_radius: int = 0
    mouse_left_click: MouseAction = MouseAction.CLOSE_CURRENT
    mouse_middle_click: MouseAction = MouseAction.DO_ACTION
    mouse_right_click: MouseAction = MouseAction.CLOSE_ALL


def default_settings() -> Settings:
    """Return a fresh copy of the compiled-in default settings."""
    return Settings()


def default_rules() -> list[Rule]:
    """Return the built-in rules, which configuration sections may override by name."""
    return [Rule(name="empty")]