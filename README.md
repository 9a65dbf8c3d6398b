# notifyd

The core logic of a lightweight desktop notification daemon, as a plain
Python library. It reads a `dunstrc`-style configuration file and resolves
the settings and notification rules from it. It also works out the geometry,
keyboard shortcut, screen, click and window-shape decisions the daemon
makes. None of it needs a display connection, and it has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `notifyd.utils`

String and time helpers.

- `string_to_time(text)` parses a duration into microseconds. A plain number
  counts as seconds. The suffixes `ms`, `s`, `m`, `h` and `d` are accepted,
  with optional whitespace before the unit, so `string_to_time("150ms")`
  gives `150000`. Input that cannot be parsed gives `0`.
- `seconds_to_us(seconds)` converts whole seconds to microseconds.
- `string_to_path(text)` expands a leading `~/` using `$HOME`.
- `string_replace_at`, `string_replace_all`, `string_append`,
  `strip_quotes` and `strip_delimited` are small string helpers.
  `strip_delimited("a<b>c", "<", ">")` gives `"ac"`.
- `time_monotonic_now()` returns a monotonic timestamp in microseconds. It
  uses the boot-time clock where the platform has one, so the clock keeps
  counting during system sleep.

### `notifyd.options`

- The enums `Alignment`, `Ellipsize`, `IconPosition`, `SeparatorColorType`,
  `FollowMode`, `MouseAction`, `MarkupMode`, `Urgency` and `Fullscreen`.
- `parse_choice(enum_cls, value)` maps a lower-case configuration word, such
  as `"close_all"`, onto an enum member. It raises `ValueError` for unknown
  words and for `None`.
- `parse_separator_color(value)` accepts `auto`, `foreground`, `frame` or
  any other non-empty string, which it takes as a custom colour.
- The dataclasses `Settings`, `Rule`, `Geometry`, `Colors`,
  `SeparatorColor` and `KeyboardShortcut`.
- `default_settings()` returns the compiled-in defaults. `default_rules()`
  returns the built-in rule list, which holds a single rule named `empty`.

### `notifyd.inifile`

`Options` reads INI sections and also takes command-line overrides.

- `Options.from_file(stream, argv)` builds one from a text stream. Passing
  `None` as the stream gives an empty configuration.
- Lines beginning with `#` or `;` are comments. Quoted values have their
  quotes removed.
- `get_string`, `get_path`, `get_int`, `get_bool` and `get_time` each take a
  section, a key, an optional flag (alternatives separated by `/`, e.g.
  `"-mon/-monitor"`) and a default.
- A flag's following argument wins over the file. For `get_bool`, the flag
  being present is enough to give `True`.
- `is_set`, `cmdline_is_set` and `sections()` report what is present.

### `notifyd.settings`

- `load_settings(config_path=None, argv=None)` returns a
  `(Settings, list[Rule])` tuple. Pass `"-"` as the path to read standard
  input. A path that cannot be opened raises `FileNotFoundError`.
- Without a path, it looks for `dunst/dunstrc` and then `dunstrc`. The
  search covers `$XDG_CONFIG_HOME` (or `~/.config`) and then each directory
  in `$XDG_CONFIG_DIRS` (or `/etc/xdg`). `find_config_file(filename)`
  performs that search.
- The `global` / `verbosity` option (`crit`, `warn`, `mesg`, `info`,
  `debug`) sets the level of the package's logger.
- `build_settings(options)` resolves every global setting.
  `build_rules(options)` turns every section that is not one of `global`,
  `frame`, `experimental`, `shortcuts` or the three `urgency_*` sections
  into a rule. A section whose name matches an existing rule updates that
  rule.
- Deprecated options are still honoured, with a logged notice:
  `allow_markup`, `icon_folders`, and the `[frame]` keys `width` and
  `color`.

### `notifyd.geometry`

`parse_geometry(text)` parses `[-][=][W][xH][{+-}X{+-}Y]` strings such as
`"300x5-30+20"` into a `Geometry`. A leading `-` sets `negative_width`. A
malformed string gives a geometry with nothing else set.

### `notifyd.shortcuts`

`parse_shortcut("ctrl+shift+space")` returns a `ParsedShortcut` with a
`Modifier` mask and the key name `"space"`.

- `"none"` or an empty string gives `None`.
- A shortcut without a key raises `ValueError`.
- `modifier_mask(name)` knows `ctrl`, `shift` and `mod1` to `mod4`. It logs
  a warning for other names and returns `Modifier.NONE`.

### `notifyd.screen`

- `ScreenInfo` describes a monitor. `contains(x, y)` tests whether a point
  is on it, and `monitor_dpi()` computes its DPI.
- `screen_dpi(...)` chooses between per-monitor DPI, an `Xft.dpi` value
  (see `parse_xft_dpi`) and the root screen's DPI.
- `select_active_screen(screens, settings, pointer, default_index)` picks
  the screen for notifications from the configured monitor and the follow
  mode.
- `is_fullscreen_state(atom_names)` detects `_NET_WM_STATE_FULLSCREEN`.
- `in_rect` is the underlying point-in-rectangle test.

### `notifyd.clicks`

- `click_action(button, settings)` maps buttons 1 to 3 to the configured
  `MouseAction`. Other buttons give `None`.
- `notification_at(y, heights, separator_height, frame_width)` returns the
  index of the notification under a vertical position. When no notification
  contains the position it returns the last index, and with no
  notifications it returns `None`.

### `notifyd.window`

- `opacity_value(transparency)` gives the `_NET_WM_WINDOW_OPACITY` value for
  a percentage. Values outside 0–100 count as fully transparent.
- `corner_centers(width, height, radius)` gives the positions of the four
  rounded-corner circles.

## Example

```python
import io
from notifyd.inifile import Options
from notifyd.settings import build_settings, build_rules

config = io.StringIO("""
[global]
geometry = "300x5-30+20"
format = "<b>%s</b>\\n%b"

[urgency_critical]
timeout = 0

[spotify]
appname = Spotify
urgency = low
""")
options = Options.from_file(config, ["-font", "Monospace 10"])
settings = build_settings(options)
rules = build_rules(options)

assert settings.font == "Monospace 10"
assert settings.geometry.w == 300
assert rules[-1].name == "spotify"
```

## What this package does not do

It is a library only. It does not:

- provide a command to run;
- listen for notifications on a message bus;
- open windows or draw anything;
- grab keys or query the display.

Callers supply the screen list, pointer position, atom names and similar
facts themselves, and act on the decisions the functions return.