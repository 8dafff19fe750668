import pytest

from sublib.utils.hex_utils import (
    find_pattern,
    format_offset,
    make_hex_string,
    parse_hex_string,
)


def test_make_hex_string_empty():
    assert make_hex_string(b"") == ""
    assert make_hex_string([]) == ""


def test_make_hex_string_pads_and_uppercases():
    assert make_hex_string([0x00, 0xFF, 0x0A]) == "00FF0A"
    assert make_hex_string(b"\xde\xad\xbe\xef") == "DEADBEEF"


def test_make_hex_string_is_two_chars_per_byte():
    data = bytes(range(256))

    result = make_hex_string(data)

    assert len(result) == 512
    assert result.startswith("000102")
    assert result.endswith("FDFEFF")


@pytest.mark.parametrize("text, expected", [
    ("FF 00 A5", b"\xff\x00\xa5"),
    ("ff00a5", b"\xff\x00\xa5"),
    ("  0a\n0B ", b"\x0a\x0b"),
    ("", b""),
])
def test_parse_hex_string_valid(text, expected):
    assert parse_hex_string(text) == expected


@pytest.mark.parametrize("text", ["GG", "F", "0x10", "A B C"])
def test_parse_hex_string_invalid(text):
    assert parse_hex_string(text) is None


def test_format_offset():
    assert format_offset(0) == "00000000"
    assert format_offset(255) == "000000FF"
    assert format_offset(4096, width=4) == "1000"


def test_find_pattern():
    data = b"\x00\x01\x02\x00\x01"

    assert find_pattern(data, b"\x00\x01") == 0
    assert find_pattern(data, b"\x00\x01", 1) == 3
    assert find_pattern(data, b"\x00\x01", 4) is None
    assert find_pattern(data, b"\x03") is None


def test_find_pattern_empty_pattern_is_not_found():
    assert find_pattern(b"abc", b"") is None
