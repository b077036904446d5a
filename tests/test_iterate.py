import pytest

from papi.iterate import (
    has_flag,
    iterate_chunks,
    iterate_flags,
    iterate_struct_tags,
    sorted_items,
)


def test_iterate_chunks_example():
    chunks = list(iterate_chunks("123,456,789,,,,,", ","))
    assert chunks == ["123", "456", "789"]
    assert len(chunks) == 3


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        (",,,", []),
        ("a", ["a"]),
        (",a,,b,", ["a", "b"]),
        ("123,456,789", ["123", "456", "789"]),
    ],
)
def test_iterate_chunks_cases(text, expected):
    assert list(iterate_chunks(text, ",")) == expected


def test_iterate_chunks_enumerates_only_non_empty():
    assert list(enumerate(iterate_chunks("x,,y", ","))) == [(0, "x"), (1, "y")]


def test_iterate_flags_example():
    assert list(iterate_flags("foo,bar,baz")) == ["foo", "bar", "baz"]


def test_iterate_flags_empty_string():
    assert list(iterate_flags("")) == []


def test_iterate_flags_skips_inner_empty():
    assert list(iterate_flags(",a,,b")) == ["a", "b"]


def test_iterate_flags_trailing_comma_yields_empty_last():
    assert list(iterate_flags("foo,")) == ["foo", ""]


def test_has_flag():
    assert has_flag("readonly,nullable", "nullable") is True
    assert has_flag("readonly,nullable", "required") is False
    assert has_flag("", "required") is False


def test_iterate_struct_tags_example():
    tags = 'json:"foo" db:"bar" number:"123"'
    assert list(iterate_struct_tags(tags)) == [
        ("json", "foo"),
        ("db", "bar"),
        ("number", "123"),
    ]


def test_iterate_struct_tags_keeps_escapes():
    assert list(iterate_struct_tags('a:"x\\"y" b:"z"')) == [("a", 'x\\"y'), ("b", "z")]


def test_iterate_struct_tags_stops_on_malformed():
    assert list(iterate_struct_tags('a:"1" b:2 c:"3"')) == [("a", "1")]


def test_iterate_struct_tags_unterminated():
    assert list(iterate_struct_tags('a:"1')) == []


def test_iterate_struct_tags_empty_value():
    assert list(iterate_struct_tags('flags:""')) == [("flags", "")]


def test_sorted_items():
    mapping = {"b": 2, "c": 3, "a": 1}
    assert list(sorted_items(mapping)) == [("a", 1), ("b", 2), ("c", 3)]


def test_sorted_items_empty():
    assert list(sorted_items({})) == []