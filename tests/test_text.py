import array
import logging

from sublib.utils.text import printable_ascii, to_string, to_string_s


def test_to_string_decodes_valid_utf8():
    text = "héllo wörld ✓"

    assert to_string(text.encode("utf-8")) == text


def test_to_string_accepts_any_bytes_view():
    raw = "abc".encode("utf-8")

    assert to_string(bytearray(raw)) == "abc"
    assert to_string(memoryview(raw)) == "abc"
    assert to_string([97, 98, 99]) == "abc"
    assert to_string(memoryview(b"aXbXc")[::2]) == "abc"


def test_to_string_empty():
    assert to_string(b"") == ""


def test_to_string_falls_back_to_byte_list():
    assert to_string(b"\xff\xfe") == "[255, 254]"
    assert to_string(memoryview(b"a\x80")) == "[97, 128]"


def test_to_string_fallback_is_logged_at_debug(caplog):
    text_logger = logging.getLogger("sublib.utils.text")
    previous_level = text_logger.level
    text_logger.addHandler(caplog.handler)
    text_logger.setLevel(logging.DEBUG)
    try:
        to_string(b"\xc3")
    finally:
        text_logger.removeHandler(caplog.handler)
        text_logger.setLevel(previous_level)

    assert "Falling back" in caplog.text


def test_to_string_s_matches_to_string():
    for data in (b"plain", b"\xff", b""):
        assert to_string_s(data) == to_string(data)


def test_printable_ascii():
    assert printable_ascii(b"Hi\x00\x7f~ ") == "Hi..~ "


def test_to_string_falls_back_to_byte_values_for_wide_views():
    wide = memoryview(array.array("H", [0xFFFF]))

    assert to_string(wide) == "[255, 255]"
