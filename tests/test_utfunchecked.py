import struct

import pytest

from minxtra import utfunchecked as u

TEXT = "excluído ausgeschloßen €😀"
DATA = TEXT.encode("utf-8")


def utf16_words(text):
    encoded = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(encoded) // 2}H", encoded))


def test_append_matches_codec():
    for ch in "aé€😀":
        assert u.append(ord(ch)) == ch.encode("utf-8")


def test_append_does_not_validate_surrogates():
    assert u.append(0xD800) == "\ud800".encode("utf-8", "surrogatepass")


def test_append16_matches_codec():
    for ch in "a€😀":
        assert list(u.append16(ord(ch))) == utf16_words(ch)


def test_utf32to8_and_back():
    code_points = [ord(ch) for ch in TEXT]
    assert u.utf32to8(code_points) == DATA
    assert u.utf8to32(DATA) == code_points


def test_utf8to16_and_back():
    words = utf16_words(TEXT)
    assert u.utf8to16(DATA) == words
    assert u.utf16to8(words) == DATA


def test_utf16to8_dangling_lead_surrogate_stops():
    assert u.utf16to8([0x41, 0xD800]) == b"A"


def test_next_code_point_walks_all():
    pos = 0
    decoded = []
    while pos < len(DATA):
        cp, pos = u.next_code_point(DATA, pos)
        decoded.append(chr(cp))
    assert "".join(decoded) == TEXT
    assert pos == len(DATA)


def test_next_code_point_truncated_raises_index_error():
    with pytest.raises(IndexError):
        u.next_code_point("€".encode("utf-8")[:2], 0)


def test_peek_next_does_not_move():
    assert u.peek_next(DATA, 0) == ord("e")
    assert u.peek_next(DATA, 0) == ord("e")


def test_next16_surrogate_pair():
    words = utf16_words("😀x")
    cp, pos = u.next16(words, 0)
    assert cp == ord("😀")
    assert pos == 2
    assert u.next16(words, pos) == (ord("x"), 3)


def test_prior_from_end():
    cp, pos = u.prior(DATA, len(DATA))
    assert cp == ord("😀")
    assert DATA[pos:] == "😀".encode("utf-8")


def test_prior_at_start_raises():
    with pytest.raises(IndexError):
        u.prior(DATA, 0)


def test_advance_round_trip():
    forward = u.advance(DATA, 0, 8)
    assert DATA[:forward].decode("utf-8") == TEXT[:8]
    assert u.advance(DATA, forward, -8) == 0


def test_distance_counts_code_points():
    assert u.distance(DATA) == len(TEXT)
    assert u.distance(b"") == 0


def test_replace_invalid_default_marker():
    assert u.replace_invalid(b"a\xffb") == b"a" + "\ufffd".encode("utf-8") + b"b"


def test_replace_invalid_incomplete_sequence():
    assert u.replace_invalid(b"a\xe2\x82b", ord("?")) == b"a?b"


def test_replace_invalid_keeps_valid_data():
    assert u.replace_invalid(DATA) == DATA


def test_iterator_moves_both_ways():
    it = u.Utf8Iterator(DATA)
    assert it.value() == ord("e")
    for _ in range(len(TEXT)):
        it.increment()
    assert it.base() == len(DATA)
    it.decrement()
    assert it.value() == ord("😀")
    assert it == u.Utf8Iterator(DATA, len(DATA) - 4)