import pytest

from notifyd.options import FollowMode, Settings
from notifyd.screen import (
    ScreenInfo,
    in_rect,
    is_fullscreen_state,
    parse_xft_dpi,
    screen_dpi,
    select_active_screen,
)


def _screens():
    return [
        ScreenInfo(id=0, x=0, y=0, w=1920, h=1080, mmh=300),
        ScreenInfo(id=1, x=1920, y=0, w=1280, h=1024, mmh=270),
        ScreenInfo(id=2, x=3200, y=0, w=800, h=600, mmh=200),
    ]


def test_in_rect_inclusive_origin_exclusive_far_edges():
    assert in_rect(0, 0, 0, 0, 10, 10) is True
    assert in_rect(9, 9, 0, 0, 10, 10) is True
    assert in_rect(10, 5, 0, 0, 10, 10) is False
    assert in_rect(5, 10, 0, 0, 10, 10) is False
    assert in_rect(-1, 5, 0, 0, 10, 10) is False


def test_screen_contains_uses_offset():
    screen = _screens()[1]
    assert screen.contains(1920, 0) is True
    assert screen.contains(1919, 0) is False
    assert screen.contains(1920 + 1280, 10) is False


def test_monitor_dpi_pinned_value():
    assert ScreenInfo(h=1000, mmh=254).monitor_dpi() == pytest.approx(100.0)


def test_monitor_dpi_scales_with_height():
    small = ScreenInfo(h=500, mmh=300).monitor_dpi()
    large = ScreenInfo(h=1000, mmh=300).monitor_dpi()
    assert large == pytest.approx(2 * small)


def test_monitor_dpi_without_physical_size_raises():
    with pytest.raises(ValueError):
        ScreenInfo(h=1000, mmh=0).monitor_dpi()


@pytest.mark.parametrize(
    "text, expected",
    [("96", 96.0), ("120.5", 120.5), ("  144dpi", 144.0), ("abc", 0.0), ("", 0.0), (None, 0.0)],
)
def test_parse_xft_dpi(text, expected):
    assert parse_xft_dpi(text) == expected


def test_screen_dpi_per_monitor():
    settings = Settings(per_monitor_dpi=True)
    screen = ScreenInfo(h=1000, mmh=254)
    assert screen_dpi(screen, settings, 96.0, 1920, 500) == screen.monitor_dpi()


def test_screen_dpi_force_xinerama_disables_per_monitor():
    settings = Settings(per_monitor_dpi=True, force_xinerama=True)
    assert screen_dpi(ScreenInfo(h=1000, mmh=254), settings, 120.0, 1920, 500) == 120.0


def test_screen_dpi_prefers_xft():
    assert screen_dpi(ScreenInfo(h=1000, mmh=254), Settings(), 110.0, 1920, 500) == 110.0


@pytest.mark.parametrize("xft", [None, 0.0, -5.0])
def test_screen_dpi_falls_back_to_root(xft):
    result = screen_dpi(ScreenInfo(h=1000, mmh=254), Settings(), xft, 1920, 500)
    assert result * 500 / 25.4 == pytest.approx(1920)


def test_screen_dpi_root_without_width_raises():
    with pytest.raises(ValueError):
        screen_dpi(ScreenInfo(), Settings(), None, 1920, 0)


def test_configured_monitor_wins():
    screens = _screens()
    settings = Settings(monitor=2, f_mode=FollowMode.MOUSE)
    assert select_active_screen(screens, settings, (10, 10), 0) is screens[2]


def test_configured_monitor_out_of_range_ignored():
    screens = _screens()
    settings = Settings(monitor=7)
    assert select_active_screen(screens, settings, None, 1) is screens[1]


def test_follow_none_uses_default():
    screens = _screens()
    settings = Settings(f_mode=FollowMode.NONE)
    assert select_active_screen(screens, settings, (2000, 10), 0) is screens[0]


def test_follow_mouse_picks_screen_under_pointer():
    screens = _screens()
    settings = Settings(f_mode=FollowMode.MOUSE)
    assert select_active_screen(screens, settings, (2000, 10), 0) is screens[1]
    assert select_active_screen(screens, settings, (3300, 10), 0) is screens[2]


def test_follow_first_screen_falls_back_to_default():
    screens = _screens()
    settings = Settings(f_mode=FollowMode.MOUSE)
    assert select_active_screen(screens, settings, (10, 10), 2) is screens[2]


def test_follow_keyboard_without_focus_uses_default():
    screens = _screens()
    settings = Settings(f_mode=FollowMode.KEYBOARD)
    assert select_active_screen(screens, settings, None, 1) is screens[1]


def test_follow_pointer_off_screen_uses_default():
    screens = _screens()
    settings = Settings(f_mode=FollowMode.MOUSE)
    assert select_active_screen(screens, settings, (-50, -50), 0) is screens[0]


def test_default_index_out_of_range_raises():
    with pytest.raises(IndexError):
        select_active_screen(_screens(), Settings(), None, 5)


def test_no_screens_raises():
    with pytest.raises(ValueError):
        select_active_screen([], Settings(), None, 0)


def test_is_fullscreen_state():
    assert is_fullscreen_state(["_NET_WM_STATE_ABOVE", "_NET_WM_STATE_FULLSCREEN"]) is True
    assert is_fullscreen_state([None, "", "_NET_WM_STATE_ABOVE"]) is False
    assert is_fullscreen_state([]) is False