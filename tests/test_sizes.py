import pytest

from papi.sizes import parse_bytes


@pytest.mark.parametrize(
    "text, expected",
    [
        ("512", 512),
        ("1kb", 1024),
        ("2MB", 2097152),
        ("1.5GiB", 1610612736),
        ("3pb", 3377699720527872),
    ],
)
def test_parse_bytes_example(text, expected):
    assert parse_bytes(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  1 KB  ", 1024),
        ("1_024", 1024),
        ("1,024b", 1024),
        ("+2k", 2048),
        ("0", 0),
        ("1t", 1 << 40),
        ("0.5k", 512),
    ],
)
def test_parse_bytes_variants(text, expected):
    assert parse_bytes(text) == expected


def test_parse_bytes_rounds_to_nearest():
    assert parse_bytes("1.0006k") == 1025


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty size"),
        ("   ", "empty size"),
        ("-1", "invalid number"),
        ("kb", "invalid number"),
        ("5xb", "unknown unit"),
        ("9223372036854775807k", "overflow"),
    ],
)
def test_parse_bytes_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_bytes(text)


@pytest.mark.parametrize("text", ["1+2", "+-5", "1.2.3", "."])
def test_parse_bytes_malformed_numbers(text):
    with pytest.raises(ValueError):
        parse_bytes(text)


def test_parse_bytes_out_of_int64_range():
    with pytest.raises(ValueError):
        parse_bytes("99999999999999999999")