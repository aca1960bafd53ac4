"""UTF-8 operations that trust their input and do no validation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from minxtra.utfcore import (
    UtfError,
    encode_code_point,
    encode_code_point16,
    is_lead_surrogate,
    is_trail,
    sequence_length,
    validate_next,
)

REPLACEMENT_MARKER = 0xFFFD
SURROGATE_OFFSET = 0xFCA02400


def _combine_surrogates(lead: int, trail: int) -> int:
    return ((lead << 10) + (trail & 0xFFFF) + SURROGATE_OFFSET) & 0xFFFFFFFF


def append(cp: int) -> bytes:
    """UTF-8 encoding of ``cp``, whether or not it is a valid code point."""
    return encode_code_point(cp)


def append16(cp: int) -> tuple[int, ...]:
    """UTF-16 encoding of ``cp``, whether or not it is a valid code point."""
    return encode_code_point16(cp)


def replace_invalid(data: Sequence[int], replacement: int = REPLACEMENT_MARKER) -> bytes:
    """Copy of ``data`` with each invalid sequence replaced by one ``replacement``."""
    out = bytearray()
    pos = 0
    while pos < len(data):
        decoded = validate_next(data, pos)
        error = decoded.error
        if error is UtfError.OK:
            out.extend(octet & 0xFF for octet in data[pos : decoded.position])
            pos = decoded.position
            continue
        out += append(replacement)
        if error is UtfError.NOT_ENOUGH_ROOM:
            pos = len(data)
        elif error is UtfError.INVALID_LEAD:
            pos += 1
        else:
            pos += 1
            while pos < len(data) and is_trail(data[pos]):
                pos += 1
    return bytes(out)


def next_code_point(data: Sequence[int], pos: int = 0) -> tuple[int, int]:
    """Decode the code point at ``pos``; returns it and the position after it.

    The sequence is assumed to be well formed; reading past the end of
    ``data`` raises IndexError.
    """
    lead = data[pos] & 0xFF
    length = sequence_length(lead)
    cp = lead
    if length == 2:
        cp = ((cp << 6) & 0x7FF) + (data[pos + 1] & 0x3F)
    elif length == 3:
        cp = ((cp << 12) & 0xFFFF) + (((data[pos + 1] & 0xFF) << 6) & 0xFFF)
        cp += data[pos + 2] & 0x3F
    elif length == 4:
        cp = ((cp << 18) & 0x1FFFFF) + (((data[pos + 1] & 0xFF) << 12) & 0x3FFFF)
        cp += ((data[pos + 2] & 0xFF) << 6) & 0xFFF
        cp += data[pos + 3] & 0x3F
    return cp, pos + max(length, 1)


def peek_next(data: Sequence[int], pos: int = 0) -> int:
    """The code point at ``pos``, without moving."""
    return next_code_point(data, pos)[0]


def next16(words: Sequence[int], pos: int = 0) -> tuple[int, int]:
    """Decode the UTF-16 code point at ``pos``; returns it and the next position."""
    cp = words[pos] & 0xFFFF
    pos += 1
    if is_lead_surrogate(cp):
        return _combine_surrogates(cp, words[pos]), pos + 1
    return cp, pos


def prior(data: Sequence[int], pos: int) -> tuple[int, int]:
    """Step back to the code point before ``pos``; returns it and its position."""
    pos -= 1
    while pos >= 0 and is_trail(data[pos]):
        pos -= 1
    if pos < 0:
        raise IndexError("no lead octet before the given position")
    return next_code_point(data, pos)[0], pos


def advance(data: Sequence[int], pos: int, n: int) -> int:
    """Position ``n`` code points away from ``pos`` (backwards if negative)."""
    if n < 0:
        for _ in range(-n):
            _, pos = prior(data, pos)
    else:
        for _ in range(n):
            _, pos = next_code_point(data, pos)
    return pos


def distance(data: Sequence[int]) -> int:
    """Number of code points in ``data``."""
    count = 0
    pos = 0
    while pos < len(data):
        _, pos = next_code_point(data, pos)
        count += 1
    return count


def utf16to8(words: Iterable[int]) -> bytes:
    """Transcode UTF-16 words to UTF-8; a dangling lead surrogate ends the output."""
    out = bytearray()
    it = iter(words)
    for word in it:
        cp = word & 0xFFFF
        if is_lead_surrogate(cp):
            trail = next(it, None)
            if trail is None:
                break
            cp = _combine_surrogates(cp, trail)
        out += append(cp)
    return bytes(out)


def utf8to16(data: Sequence[int]) -> list[int]:
    """Transcode UTF-8 bytes to UTF-16 words."""
    words: list[int] = []
    pos = 0
    while pos < len(data):
        cp, pos = next_code_point(data, pos)
        words.extend(encode_code_point16(cp))
    return words


def utf32to8(code_points: Iterable[int]) -> bytes:
    """Encode code points as UTF-8 bytes."""
    return b"".join(append(cp) for cp in code_points)


def utf8to32(data: Sequence[int]) -> list[int]:
    """Decode UTF-8 bytes into code points."""
    code_points: list[int] = []
    pos = 0
    while pos < len(data):
        cp, pos = next_code_point(data, pos)
        code_points.append(cp)
    return code_points


class Utf8Iterator:
    """Bidirectional cursor over the code points of UTF-8 data, without checks."""

    def __init__(self, data: Sequence[int], position: int = 0) -> None:
        self._data = data
        self._position = position

    def base(self) -> int:
        """The underlying byte position."""
        return self._position

    def value(self) -> int:
        """The code point at the current position."""
        return next_code_point(self._data, self._position)[0]

    def increment(self) -> Utf8Iterator:
        self._position += sequence_length(self._data[self._position])
        return self

    def decrement(self) -> Utf8Iterator:
        _, self._position = prior(self._data, self._position)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Utf8Iterator):
            return NotImplemented
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]