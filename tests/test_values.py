from __future__ import annotations

import pytest

from scripts.tomlsort import Decor, Scalar, TomlFormatter
from scripts.tomlsort.formatter import normalize_quotes


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("'hello'", '"hello"'),
        ("'C:\\path'", "'C:\\path'"),
        ("'say \"hi\"'", "'say \"hi\"'"),
        ("'''multi\nline'''", "'''multi\nline'''"),
        ("''", "''"),
        ('"already"', '"already"'),
    ],
)
def test_normalize_quotes(raw, expected):
    assert normalize_quotes(raw) == expected


def test_single_quoted_string_is_rewritten(sort_toml):
    assert sort_toml("a = 'hello'\n") == 'a = "hello"\n'


def test_literal_with_backslash_is_left_alone(sort_toml):
    assert sort_toml("a = 'C:\\temp'\n") == "a = 'C:\\temp'\n"


def test_value_spacing_is_normalized(sort_toml):
    assert sort_toml("a =    1    \nb =\t2\n") == "a = 1\nb = 2\n"


def test_non_string_scalars_are_untouched(sort_toml):
    text = "d = 1979-05-27T07:32:00Z\nf = 1e3\ni = 1_000\nb = true\n"
    assert sort_toml(text) == "b = true\nd = 1979-05-27T07:32:00Z\nf = 1e3\ni = 1_000\n"


def test_scalar_trivia_is_trimmed_and_rewrapped():
    value = Scalar("integer", "1", decor=Decor(prefix="   ", suffix="   # note   "))
    formatted = TomlFormatter().format_value(value, last=False)
    assert formatted.decor == Decor(prefix=" ", suffix=" # note")


def test_last_value_gets_closing_space():
    value = Scalar("string", "'x'", content="x", decor=Decor(prefix="", suffix=""))
    formatted = TomlFormatter().format_value(value, last=True)
    assert formatted.raw == '"x"'
    assert formatted.content == "x"
    assert formatted.decor == Decor(prefix=" ", suffix=" ")
