import pytest

from notifyd.utils import (
    seconds_to_us,
    string_append,
    string_replace_all,
    string_replace_at,
    string_to_path,
    string_to_time,
    strip_delimited,
    strip_quotes,
    time_monotonic_now,
)


def test_seconds_to_us_scale():
    assert seconds_to_us(1) == 1_000_000
    assert seconds_to_us(0) == 0
    assert seconds_to_us(3) == 3 * seconds_to_us(1)


def test_replace_at_shorter_and_longer():
    text = "hello world"
    assert string_replace_at(text, 0, 5, "bye") == "bye" + " world"
    assert string_replace_at(text, 6, 5, "everyone") == "hello " + "everyone"


def test_replace_at_insert_with_zero_length():
    assert string_replace_at("ac", 1, 0, "b") == "a" + "b" + "c"


def test_replace_all_none_haystack():
    assert string_replace_all("a", "b", None) is None


def test_replace_all_empty_needle_returns_input():
    assert string_replace_all("", "x", "abc") == "abc"


def test_replace_all_removes_every_occurrence():
    result = string_replace_all("foo", "bar", "foo and foo")
    assert "foo" not in result
    assert result.count("bar") == 2


def test_replace_all_does_not_rescan_replacement():
    haystack = "aaa"
    result = string_replace_all("a", "aa", haystack)
    assert len(result) == 2 * len(haystack)
    assert set(result) == {"a"}


def test_replace_all_non_overlapping():
    assert string_replace_all("aa", "a", "aaaa") == "aa"


@pytest.mark.parametrize("needle,replacement,haystack", [
    ("x", "yy", "axbxcx"),
    ("ab", "", "abcabc"),
    ("%s", "summary", "%s %b %s"),
])
def test_replace_all_length_invariant(needle, replacement, haystack):
    count = haystack.count(needle)
    result = string_replace_all(needle, replacement, haystack)
    assert len(result) == len(haystack) + count * (len(replacement) - len(needle))


def test_string_append_with_separator():
    a, b, sep = "first", "second", ", "
    assert string_append(a, b, sep) == a + sep + b


def test_string_append_without_separator():
    assert string_append("ab", "cd", None) == "ab" + "cd"


def test_string_append_empty_sides():
    assert string_append(None, "b", "-") == "b"
    assert string_append("", "b", "-") == "b"
    assert string_append("a", "", "-") == "a"
    assert string_append("a", None, "-") == "a"
    assert string_append(None, None, "-") is None


def test_strip_quotes():
    assert strip_quotes('"hello"') == "hello"
    assert strip_quotes('say "hi"') == 'say "hi"'
    assert strip_quotes('"in "side""') == 'in "side"'
    assert strip_quotes(None) is None
    assert strip_quotes("") == ""


def test_strip_quotes_single_quote_char():
    assert strip_quotes('"') == ""


def test_strip_delimited_markup():
    assert strip_delimited("<b>bold</b> text", "<", ">") == "bold text"


def test_strip_delimited_nested_and_unbalanced():
    result = strip_delimited("a<<b>c>d>e", "<", ">")
    assert "b" not in result and "c" not in result
    assert result.startswith("a")
    assert result.endswith("e")


def test_strip_delimited_no_delimiters():
    assert strip_delimited("plain", "<", ">") == "plain"


def test_string_to_path_expands_home(monkeypatch):
    home = "/home/someone"
    monkeypatch.setenv("HOME", home)
    assert string_to_path("~/icons") == home + "/icons"


def test_string_to_path_leaves_other_paths():
    assert string_to_path("/usr/bin/dmenu") == "/usr/bin/dmenu"
    assert string_to_path("~user/x") == "~user/x"
    assert string_to_path(None) is None


def test_string_to_time_plain_seconds():
    assert string_to_time("10") == seconds_to_us(10)
    assert string_to_time("0") == 0
    assert string_to_time("-1") == -seconds_to_us(1)


def test_string_to_time_units():
    assert string_to_time("1000ms") == seconds_to_us(1)
    assert string_to_time("5s") == string_to_time("5")
    assert string_to_time("2m") == string_to_time("120")
    assert string_to_time("1h") == string_to_time("3600")
    assert string_to_time("1d") == string_to_time("86400")


def test_string_to_time_space_before_unit():
    assert string_to_time("5 s") == string_to_time("5")
    assert string_to_time("3 ms") == string_to_time("3ms")


@pytest.mark.parametrize("text", ["abc", "", "10x", "ms", "99999999999999999999"])
def test_string_to_time_invalid_is_zero(text):
    assert string_to_time(text) == 0


def test_time_monotonic_now_nondecreasing():
    first = time_monotonic_now()
    second = time_monotonic_now()
    assert first >= 0
    assert second >= first