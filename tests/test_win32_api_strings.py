import pytest

from minxtra.utfchecked import InvalidUtf8, InvalidUtf16
from minxtra.win32_api_strings import to_utf8, to_utf16

ASCII = "whatever in English"
NON_ASCII = "excluído ausgeschloßen"


def test_to_utf8_ascii_only():
    expected = ASCII.encode("utf-8")
    assert to_utf8(ASCII) == expected
    assert to_utf8(ASCII, 19) == expected


def test_to_utf8_not_ascii():
    expected = NON_ASCII.encode("utf-8")
    words = [ord(ch) for ch in NON_ASCII]
    assert to_utf8(NON_ASCII) == expected
    assert to_utf8(words, 22) == expected


def test_to_utf8_stops_at_zero_word():
    words = [ord(ch) for ch in "ab"] + [0, ord("c")]
    assert to_utf8(words) == b"ab"
    assert to_utf8(words, 4) == b"ab\x00c"


def test_to_utf16_ascii_only():
    given = ASCII.encode("utf-8")
    expected = [ord(ch) for ch in ASCII]
    assert to_utf16(given) == expected
    assert to_utf16(ASCII) == expected
    assert to_utf16(given, 19) == expected


def test_to_utf16_not_ascii():
    given = NON_ASCII.encode("utf-8")
    expected = [ord(ch) for ch in NON_ASCII]
    assert to_utf16(given) == expected
    assert to_utf16(NON_ASCII) == expected
    assert to_utf16(given, 24) == expected


def test_round_trip_german_text():
    text = "Das ist ein gültiger Text auf Deutsch. Das heißt: er muss schön gezeigt werden."
    assert to_utf8(to_utf16(text)) == text.encode("utf-8")


def test_to_utf8_lone_surrogate_raises():
    with pytest.raises(InvalidUtf16):
        to_utf8([0x41, 0xDC00])


def test_to_utf16_invalid_bytes_raise():
    with pytest.raises(InvalidUtf8):
        to_utf16(b"a\xffb")