from __future__ import annotations

from scripts.tomlsort import Array, Decor, Scalar, SortConfig, TomlFormatter


def test_inline_array_is_spaced(sort_toml):
    assert sort_toml("a = [1,2,   3]\n") == "a = [ 1, 2, 3 ]\n"


def test_empty_array(sort_toml):
    assert sort_toml("a = []\n") == "a = []\n"


def test_string_arrays_are_not_sorted_by_default(sort_toml):
    assert sort_toml('a = ["b", "a"]\n') == 'a = [ "b", "a" ]\n'


def test_strings_sort_before_other_values(sort_toml):
    text = 'a = ["banana", 3, "apple", true]\n'
    assert sort_toml(text, sort_string_arrays=True) == 'a = [ "apple", "banana", 3, true ]\n'


def test_non_strings_keep_their_relative_order():
    values = [Scalar("integer", "3"), Scalar("string", '"b"', content="b"), Scalar("integer", "1")]
    formatter = TomlFormatter(config=SortConfig.create(sort_string_arrays=True))
    formatted = formatter.format_array(Array(values=values), last=False)
    assert [value.raw for value in formatted.values] == ['"b"', "3", "1"]


def test_nested_arrays(sort_toml):
    assert sort_toml("a = [[1,2],[3]]\n") == "a = [ [ 1, 2 ], [ 3 ] ]\n"


def test_multiline_array_keeps_comments_and_trailing_comma(sort_toml):
    text = """\
    a = [
        # first
        "x", # trailing note
        "y",
    ]
    """
    expected = 'a = [\n\t# first\n\t"x",\n\t# trailing note\n\t"y",\n]\n'
    once = sort_toml(text)
    assert once == expected
    assert sort_toml(once) == once


def test_multiline_array_without_trailing_comma_becomes_inline(sort_toml):
    assert sort_toml("a = [\n  1,\n  2\n]\n") == "a = [ 1, 2 ]\n"


def test_comment_after_last_comma_forces_multiline(sort_toml):
    once = sort_toml("a = [1, 2, # two\n]\n")
    assert once == "a = [\n\t1,\n\t2, # two\n]\n"
    assert sort_toml(once) == once


def test_multiline_sorted_strings_keep_their_comments(sort_toml):
    text = """\
    deps = [
        # web
        "requests",
        # cli
        "click",
    ]
    """
    expected = 'deps = [\n\t# cli\n\t"click",\n\t# web\n\t"requests",\n]\n'
    assert sort_toml(text, sort_string_arrays=True) == expected


def test_element_comment_before_comma_stays_before_comma():
    value = Scalar("integer", "1", decor=Decor(prefix="\n  ", suffix=" # one\n  "))
    array = Array(values=[value], trailing="\n", trailing_comma=True)
    formatted = TomlFormatter().format_array(array, last=False)
    assert formatted.values[0].decor == Decor(prefix="\n\t", suffix=" # one\n\t")
    assert formatted.trailing == "\n"
    assert formatted.trailing_comma


def test_array_outer_decor():
    formatter = TomlFormatter()
    assert formatter.format_array(Array(decor=Decor("\t", "  ")), last=True).decor == Decor(" ", " ")
    assert formatter.format_array(Array(decor=Decor("\t", "  ")), last=False).decor == Decor(" ", "")


def test_array_value_comment_is_kept(sort_toml):
    assert sort_toml("a = [1] # list\n") == "a = [ 1 ] # list\n"
