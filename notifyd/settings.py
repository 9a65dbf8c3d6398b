"""Assembly of the runtime settings and rules from configuration and flags."""

from __future__ import annotations

import contextlib
import logging
import os
import shlex
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO, TypeVar

from .geometry import parse_geometry
from .inifile import Options
from .options import (
    Alignment,
    Colors,
    Ellipsize,
    FollowMode,
    Fullscreen,
    IconPosition,
    KeyboardShortcut,
    MarkupMode,
    MouseAction,
    Rule,
    Settings,
    Urgency,
    default_rules,
    default_settings,
    parse_choice,
    parse_separator_color,
)

log = logging.getLogger(__name__)

E = TypeVar("E")

_RESERVED_SECTIONS = frozenset(
    {
        "global",
        "frame",
        "experimental",
        "shortcuts",
        "urgency_low",
        "urgency_normal",
        "urgency_critical",
    }
)

_MESSAGE_LEVEL = (logging.WARNING + logging.INFO) // 2

_VERBOSITY_LEVELS = {
    "crit": logging.CRITICAL,
    "warn": logging.WARNING,
    "mesg": _MESSAGE_LEVEL,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_URGENCY_SECTIONS = (
    (Urgency.LOW, "urgency_low", "l", "colors_low", "low"),
    (Urgency.NORMAL, "urgency_normal", "n", "colors_norm", "normal"),
    (Urgency.CRITICAL, "urgency_critical", "c", "colors_crit", "critical"),
)


def _config_dirs() -> Iterator[Path]:
    user_dir = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    yield Path(user_dir)
    system_dirs = os.environ.get("XDG_CONFIG_DIRS") or "/etc/xdg"
    for directory in system_dirs.split(":"):
        if directory:
            yield Path(directory)


def find_config_file(filename: str) -> Path | None:
    """Return the first readable ``filename`` in the user or system config dirs."""
    for directory in _config_dirs():
        candidate = directory / filename
        if candidate.is_file() and os.access(candidate, os.R_OK):
            return candidate
    return None


def _open_config(config_path: str | None) -> contextlib.AbstractContextManager[TextIO | None]:
    if config_path == "-":
        return contextlib.nullcontext(sys.stdin)
    if config_path is not None:
        try:
            return open(config_path, encoding="utf-8")
        except OSError as err:
            raise FileNotFoundError(f"Cannot find config file: '{config_path}'") from err
    for name in ("dunst/dunstrc", "dunstrc"):
        path = find_config_file(name)
        if path is not None:
            return open(path, encoding="utf-8")
    log.warning("No dunstrc found.")
    return contextlib.nullcontext(None)


def _apply_verbosity(value: str | None) -> None:
    if value is None:
        return
    level = _VERBOSITY_LEVELS.get(value)
    if level is None:
        log.warning("Unknown log level: '%s'", value)
        return
    logging.getLogger(__package__ or "notifyd").setLevel(level)


def load_settings(
    config_path: str | None = None, argv: Sequence[str] | None = None
) -> tuple[Settings, list[Rule]]:
    """Read the configuration (``-`` for stdin) and return settings and rules.

    Without a path the XDG config directories are searched. A path that
    cannot be opened raises :class:`FileNotFoundError`.
    """
    with _open_config(config_path) as stream:
        options = Options.from_file(stream, argv)
    _apply_verbosity(options.get_string("global", "verbosity", "-verbosity", None))
    return build_settings(options), build_rules(options)


def _choice(enum_cls: type[E], value: str | None, default: E, what: str) -> E:
    try:
        return parse_choice(enum_cls, value)
    except ValueError:
        if value is not None:
            log.warning("Unknown %s value: '%s'", what, value)
        return default


def _shell_split(command: str | None, what: str) -> list[str] | None:
    try:
        args = shlex.split(command or "")
    except ValueError as err:
        log.warning("Unable to parse %s command: '%s'. Functionality disabled.", what, err)
        return None
    if not args:
        log.warning("Unable to parse %s command: text was empty. Functionality disabled.", what)
        return None
    return args


def _markup(options: Options, default: MarkupMode | None) -> MarkupMode | None:
    markup = None
    if options.is_set("global", "allow_markup"):
        allow = options.get_bool("global", "allow_markup", None, False)
        markup = MarkupMode.FULL if allow else MarkupMode.STRIP
        log.log(_MESSAGE_LEVEL, "'allow_markup' is deprecated, please use 'markup' instead.")
    value = options.get_string("global", "markup", "-markup", None)
    try:
        return parse_choice(MarkupMode, value)
    except ValueError:
        if value is not None:
            log.warning("Cannot parse markup mode value: '%s'", value)
        return markup if markup is not None else default


def _limit_icon_size(settings: Settings) -> None:
    geometry = settings.geometry
    if not (geometry.width_set and geometry.w != 0):
        return
    limit = geometry.w // 2
    if settings.max_icon_size == 0 or settings.max_icon_size > limit:
        if settings.max_icon_size != 0:
            log.warning(
                "Max width was set to %d but got a max_icon_size of %d, too large to use. "
                "Setting max_icon_size=%d",
                geometry.w,
                settings.max_icon_size,
                limit,
            )
        else:
            log.info(
                "Max width was set but max_icon_size is unlimited. Limiting icons to %d pixels",
                limit,
            )
        settings.max_icon_size = limit


def build_settings(options: Options) -> Settings:
    """Resolve every global setting from ``options`` over the compiled-in defaults."""
    defaults = default_settings()
    s = Settings()

    s.per_monitor_dpi = options.get_bool("experimental", "per_monitor_dpi", None, False)
    s.force_xinerama = options.get_bool("global", "force_xinerama", "-force_xinerama", False)
    s.font = options.get_string("global", "font", "-font/-fn", defaults.font)
    s.markup = _markup(options, defaults.markup)
    s.format = options.get_string("global", "format", "-format", defaults.format)
    s.sort = options.get_bool("global", "sort", "-sort", defaults.sort)
    s.indicate_hidden = options.get_bool(
        "global", "indicate_hidden", "-indicate_hidden", defaults.indicate_hidden
    )
    s.word_wrap = options.get_bool("global", "word_wrap", "-word_wrap", defaults.word_wrap)
    s.ellipsize = _choice(
        Ellipsize,
        options.get_string("global", "ellipsize", "-ellipsize", None),
        defaults.ellipsize,
        "ellipsize",
    )
    s.ignore_newline = options.get_bool(
        "global", "ignore_newline", "-ignore_newline", defaults.ignore_newline
    )
    s.idle_threshold = options.get_time(
        "global", "idle_threshold", "-idle_threshold", defaults.idle_threshold
    )
    s.monitor = options.get_int("global", "monitor", "-mon/-monitor", defaults.monitor)
    s.f_mode = _choice(
        FollowMode,
        options.get_string("global", "follow", "-follow", None),
        defaults.f_mode,
        "follow mode",
    )
    s.title = options.get_string("global", "title", "-t/-title", defaults.title)
    s.window_class = options.get_string("global", "class", "-c/-class", defaults.window_class)

    geometry = options.get_string("global", "geometry", "-geom/-geometry", None)
    s.geometry = parse_geometry(geometry) if geometry is not None else defaults.geometry

    s.shrink = options.get_bool("global", "shrink", "-shrink", defaults.shrink)
    s.line_height = options.get_int(
        "global", "line_height", "-lh/-line_height", defaults.line_height
    )
    s.notification_height = options.get_int(
        "global", "notification_height", "-nh/-notification_height", defaults.notification_height
    )
    s.align = _choice(
        Alignment,
        options.get_string("global", "alignment", "-align/-alignment", None),
        defaults.align,
        "alignment",
    )
    s.show_age_threshold = options.get_time(
        "global", "show_age_threshold", "-show_age_threshold", defaults.show_age_threshold
    )
    s.hide_duplicate_count = options.get_bool(
        "global", "hide_duplicate_count", "-hide_duplicate_count", False
    )
    s.sticky_history = options.get_bool(
        "global", "sticky_history", "-sticky_history", defaults.sticky_history
    )
    s.history_length = options.get_int(
        "global", "history_length", "-history_length", defaults.history_length
    )
    s.show_indicators = options.get_bool(
        "global", "show_indicators", "-show_indicators", defaults.show_indicators
    )
    s.separator_height = options.get_int(
        "global", "separator_height", "-sep_height/-separator_height", defaults.separator_height
    )
    s.padding = options.get_int("global", "padding", "-padding", defaults.padding)
    s.h_padding = options.get_int(
        "global", "horizontal_padding", "-horizontal_padding", defaults.h_padding
    )
    s.transparency = options.get_int(
        "global", "transparency", "-transparency", defaults.transparency
    )
    s.corner_radius = options.get_int(
        "global", "corner_radius", "-corner_radius", defaults.corner_radius
    )

    try:
        s.sep_color = parse_separator_color(
            options.get_string("global", "separator_color", "-sep_color/-separator_color", "")
        )
    except ValueError:
        s.sep_color = defaults.sep_color

    s.stack_duplicates = options.get_bool(
        "global", "stack_duplicates", "-stack_duplicates", True
    )
    s.startup_notification = options.get_bool(
        "global", "startup_notification", "-startup_notification", False
    )

    s.dmenu = options.get_path("global", "dmenu", "-dmenu", defaults.dmenu)
    s.dmenu_cmd = _shell_split(s.dmenu, "dmenu")
    s.browser = options.get_path("global", "browser", "-browser", defaults.browser)
    s.browser_cmd = _shell_split(s.browser, "browser")

    s.icon_position = _choice(
        IconPosition,
        options.get_string("global", "icon_position", "-icon_position", "off"),
        defaults.icon_position,
        "icon position",
    )
    s.max_icon_size = options.get_int(
        "global", "max_icon_size", "-max_icon_size", defaults.max_icon_size
    )
    _limit_icon_size(s)

    icon_path = None
    if options.is_set("global", "icon_folders") or options.cmdline_is_set("-icon_folders"):
        icon_path = options.get_string(
            "global", "icon_folders", "-icon_folders", defaults.icon_path
        )
        log.log(
            _MESSAGE_LEVEL,
            "The option 'icon_folders' is deprecated, please use 'icon_path' instead.",
        )
    s.icon_path = options.get_string(
        "global",
        "icon_path",
        "-icon_path",
        icon_path if icon_path is not None else defaults.icon_path,
    )

    frame_width = 0
    if options.is_set("frame", "width"):
        frame_width = options.get_int("frame", "width", None, defaults.frame_width)
        log.log(
            _MESSAGE_LEVEL,
            "The frame section is deprecated, width has been renamed to frame_width "
            "and moved to the global section.",
        )
    s.frame_width = options.get_int(
        "global", "frame_width", "-frame_width", frame_width or defaults.frame_width
    )

    frame_color = None
    if options.is_set("frame", "color"):
        frame_color = options.get_string("frame", "color", None, defaults.frame_color)
        log.log(
            _MESSAGE_LEVEL,
            "The frame section is deprecated, color has been renamed to frame_color "
            "and moved to the global section.",
        )
    s.frame_color = options.get_string(
        "global",
        "frame_color",
        "-frame_color",
        frame_color if frame_color is not None else defaults.frame_color,
    )

    s.mouse_left_click = _choice(
        MouseAction,
        options.get_string("global", "mouse_left_click", "-left_click", None),
        defaults.mouse_left_click,
        "mouse action",
    )
    s.mouse_middle_click = _choice(
        MouseAction,
        options.get_string("global", "mouse_middle_click", "-mouse_middle_click", None),
        defaults.mouse_middle_click,
        "mouse action",
    )
    s.mouse_right_click = _choice(
        MouseAction,
        options.get_string("global", "mouse_right_click", "-mouse_right_click", None),
        defaults.mouse_right_click,
        "mouse action",
    )

    for urgency, section, prefix, attr, _label in _URGENCY_SECTIONS:
        default_colors: Colors = getattr(defaults, attr)
        colors = Colors(
            bg=options.get_string(section, "background", f"-{prefix}b", default_colors.bg),
            fg=options.get_string(section, "foreground", f"-{prefix}f", default_colors.fg),
            frame=options.get_string(
                section,
                "frame_color",
                f"-{prefix}fr",
                s.frame_color if s.frame_color is not None else default_colors.frame,
            ),
        )
        setattr(s, attr, colors)
        s.timeouts[urgency] = options.get_time(
            section, "timeout", f"-{prefix}to", defaults.timeouts[urgency]
        )
        s.icons[urgency] = options.get_string(
            section, "icon", f"-{prefix}i", defaults.icons[urgency]
        )

    s.close_ks = KeyboardShortcut(
        text=options.get_string("shortcuts", "close", "-key", defaults.close_ks.text)
    )
    s.close_all_ks = KeyboardShortcut(
        text=options.get_string("shortcuts", "close_all", "-all_key", defaults.close_all_ks.text)
    )
    s.history_ks = KeyboardShortcut(
        text=options.get_string("shortcuts", "history", "-history_key", defaults.history_ks.text)
    )
    s.context_ks = KeyboardShortcut(
        text=options.get_string("shortcuts", "context", "-context_key", defaults.context_ks.text)
    )

    s.print_notifications = options.cmdline_is_set("-print")
    s.always_run_script = options.get_bool(
        "global", "always_run_script", "-always_run_script", True
    )
    return s


def _urgency(options: Options, section: str, key: str, default: Urgency | None) -> Urgency | None:
    value = options.get_string(section, key, None, None)
    try:
        return parse_choice(Urgency, value)
    except ValueError:
        if value is not None:
            log.warning("Unknown urgency: '%s'", value)
        return default


def _optional_choice(options: Options, section: str, key: str, enum_cls, current):
    value = options.get_string(section, key, None, None)
    try:
        return parse_choice(enum_cls, value)
    except ValueError:
        if value is not None:
            log.warning("Invalid %s value: %s", key, value)
        return current


def build_rules(options: Options) -> list[Rule]:
    """Return the built-in rules followed by, or overridden by, configured sections."""
    rules = default_rules()
    for section in options.sections():
        if section in _RESERVED_SECTIONS:
            continue

        rule = None
        for candidate in rules:
            if candidate.name == section:
                rule = candidate
        if rule is None:
            rule = Rule()
            rules.append(rule)

        get = options.get_string
        rule.name = section
        rule.appname = get(section, "appname", None, rule.appname)
        rule.summary = get(section, "summary", None, rule.summary)
        rule.body = get(section, "body", None, rule.body)
        rule.icon = get(section, "icon", None, rule.icon)
        rule.category = get(section, "category", None, rule.category)
        rule.stack_tag = get(section, "stack_tag", None, rule.stack_tag)
        rule.timeout = options.get_time(section, "timeout", None, rule.timeout)
        rule.markup = _optional_choice(options, section, "markup", MarkupMode, rule.markup)
        rule.urgency = _urgency(options, section, "urgency", rule.urgency)
        rule.msg_urgency = _urgency(options, section, "msg_urgency", rule.msg_urgency)
        rule.fg = get(section, "foreground", None, rule.fg)
        rule.bg = get(section, "background", None, rule.bg)
        rule.fc = get(section, "frame_color", None, rule.fc)
        rule.format = get(section, "format", None, rule.format)
        rule.new_icon = get(section, "new_icon", None, rule.new_icon)
        rule.history_ignore = options.get_bool(section, "history_ignore", None, rule.history_ignore)
        rule.match_transient = options.get_bool(
            section, "match_transient", None, rule.match_transient
        )
        rule.set_transient = options.get_bool(section, "set_transient", None, rule.set_transient)
        rule.desktop_entry = get(section, "desktop_entry", None, rule.desktop_entry)
        rule.skip_display = options.get_bool(section, "skip_display", None, rule.skip_display)
        rule.fullscreen = _optional_choice(
            options, section, "fullscreen", Fullscreen, rule.fullscreen
        )
        rule.script = options.get_path(section, "script", None, None)
        rule.set_stack_tag = get(section, "set_stack_tag", None, rule.set_stack_tag)
    return rules