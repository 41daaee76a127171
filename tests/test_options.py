from __future__ import annotations

import pytest

from unislug.models import SlugOptions
from unislug.options import (
    get_ignored_codepoints,
    get_separator,
    get_truncate_length,
    resolve_options,
)


def test_resolve_options_defaults():
    assert resolve_options() == SlugOptions(
        separator="-",
        lowercase=True,
        truncate_length=None,
        ignored_codepoints=frozenset({ord("-")}),
    )


def test_resolve_options_ignores_unknown_keys():
    assert resolve_options(colour="blue") == resolve_options()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("_", "_"),
        ("", ""),
        ("--", "--"),
        (ord("."), "."),
        (0x4E16, "世"),
        (0, "\x00"),
        (None, "-"),
        (True, "-"),
        (-5, "-"),
        (0x110000, "-"),
        (0xDFFF, "-"),
        (b"_", "-"),
        (["_"], "-"),
    ],
)
def test_get_separator(value: object, expected: str):
    assert get_separator(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10, 10),
        (1, 1),
        (0, 0),
        (-3, 0),
        (None, None),
        ("10", None),
        (2.5, None),
        (False, None),
    ],
)
def test_get_truncate_length(value: object, expected: int | None):
    assert get_truncate_length(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (False, False),
        (True, True),
        (None, True),
        (0, True),
        ("false", True),
    ],
)
def test_lowercase_resolution(value: object, expected: bool):
    assert resolve_options(lowercase=value).lowercase is expected


def test_ignored_codepoints_from_string_include_separator():
    assert get_ignored_codepoints("_", "éü") == frozenset(map(ord, "éü_"))


def test_ignored_codepoints_from_list_drop_separator_entries():
    assert get_ignored_codepoints("_", ["é", "_", "ü"]) == frozenset(map(ord, "éü_"))


def test_ignored_codepoints_from_list_skip_non_strings():
    assert get_ignored_codepoints("-", ["é", 7, None]) == frozenset(map(ord, "é-"))


def test_ignored_codepoints_strip_separator_substring_from_string():
    # Only the separator sequence is removed, not its characters on their own.
    assert get_ignored_codepoints("ab", "xaby") == frozenset(map(ord, "xyab"))
    assert get_ignored_codepoints("ab", "ba") == frozenset(map(ord, "ab"))


def test_ignored_codepoints_with_empty_separator():
    assert get_ignored_codepoints("", "é") == frozenset({ord("é")})
    assert get_ignored_codepoints("", None) == frozenset()


def test_ignored_codepoints_are_nfc_normalized():
    decomposed = "e\u0301"
    assert get_ignored_codepoints("-", decomposed) == frozenset({0xE9, ord("-")})


def test_resolve_options_with_codepoint_separator_ignores_it():
    options = resolve_options(separator=0x2022)

    assert options.separator == "•"
    assert 0x2022 in options.ignored_codepoints
