"""Checked UTF-8 operations that raise on malformed input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from minxtra.utfcore import (
    LEAD_SURROGATE_MIN,
    TRAIL_SURROGATE_MIN,
    UtfError,
    encode_code_point,
    encode_code_point16,
    is_code_point_valid,
    is_lead_surrogate,
    is_trail,
    is_trail_surrogate,
    validate_next,
    validate_next16,
)

REPLACEMENT_MARKER = 0xFFFD


class Utf8Exception(Exception):
    """Base of the errors raised by the checked UTF operations."""


class InvalidCodePoint(Utf8Exception):
    """A value that is not a valid Unicode code point."""

    def __init__(self, code_point: int) -> None:
        super().__init__("Invalid code point")
        self.code_point = code_point


class InvalidUtf8(Utf8Exception):
    """A malformed UTF-8 sequence."""

    def __init__(self, octet: int) -> None:
        super().__init__("Invalid UTF-8")
        self.utf8_octet = octet & 0xFF


class InvalidUtf16(Utf8Exception):
    """A malformed UTF-16 sequence."""

    def __init__(self, word: int) -> None:
        super().__init__("Invalid UTF-16")
        self.utf16_word = word & 0xFFFF


class NotEnoughRoom(Utf8Exception):
    """The input ended in the middle of a sequence."""

    def __init__(self) -> None:
        super().__init__("Not enough space")


def append(cp: int) -> bytes:
    """UTF-8 encoding of ``cp``; raises InvalidCodePoint if it is not valid."""
    if not is_code_point_valid(cp):
        raise InvalidCodePoint(cp)
    return encode_code_point(cp)


def append16(cp: int) -> tuple[int, ...]:
    """UTF-16 encoding of ``cp``; raises InvalidCodePoint if it is not valid."""
    if not is_code_point_valid(cp):
        raise InvalidCodePoint(cp)
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
        elif error is UtfError.NOT_ENOUGH_ROOM:
            out += append(replacement)
            pos = len(data)
        elif error is UtfError.INVALID_LEAD:
            out += append(replacement)
            pos += 1
        else:
            out += append(replacement)
            pos += 1
            while pos < len(data) and is_trail(data[pos]):
                pos += 1
    return bytes(out)


def _next(data: Sequence[int], pos: int, end: int | None = None) -> tuple[int, int]:
    view = data if end is None or end >= len(data) else data[:end]
    decoded = validate_next(view, pos)
    error = decoded.error
    if error is UtfError.OK:
        return decoded.code_point, decoded.position
    if error is UtfError.NOT_ENOUGH_ROOM:
        raise NotEnoughRoom()
    if error is UtfError.INVALID_CODE_POINT:
        raise InvalidCodePoint(decoded.code_point)
    raise InvalidUtf8(view[pos])


def next_code_point(data: Sequence[int], pos: int = 0) -> tuple[int, int]:
    """Decode the code point at ``pos``; returns it and the position after it."""
    return _next(data, pos)


def next16(words: Sequence[int], pos: int = 0) -> tuple[int, int]:
    """Decode the UTF-16 code point at ``pos``; returns it and the next position.

    Only a truncated input raises; other malformed input yields code point 0
    and leaves the position where it was.
    """
    decoded = validate_next16(words, pos)
    if decoded.error is UtfError.NOT_ENOUGH_ROOM:
        raise NotEnoughRoom()
    return decoded.code_point, decoded.position


def peek_next(data: Sequence[int], pos: int = 0) -> int:
    """The code point at ``pos``, without moving."""
    return _next(data, pos)[0]


def prior(data: Sequence[int], pos: int, start: int = 0) -> tuple[int, int]:
    """Step back to the code point before ``pos``; returns it and its position."""
    if pos == start:
        raise NotEnoughRoom()
    end = pos
    pos -= 1
    while is_trail(data[pos]):
        if pos == start:
            raise InvalidUtf8(data[pos])
        pos -= 1
    return _next(data, pos, end)[0], pos


def advance(data: Sequence[int], pos: int, n: int) -> int:
    """Position ``n`` code points away from ``pos`` (backwards if negative)."""
    if n < 0:
        for _ in range(-n):
            _, pos = prior(data, pos)
    else:
        for _ in range(n):
            _, pos = _next(data, pos)
    return pos


def distance(data: Sequence[int]) -> int:
    """Number of code points in ``data``."""
    count = 0
    pos = 0
    while pos < len(data):
        _, pos = _next(data, pos)
        count += 1
    return count


def utf16to8(words: Iterable[int]) -> bytes:
    """Transcode UTF-16 words to UTF-8 bytes."""
    out = bytearray()
    it = iter(words)
    for word in it:
        cp = word & 0xFFFF
        if is_lead_surrogate(cp):
            trail = next(it, None)
            if trail is None:
                raise InvalidUtf16(cp)
            trail &= 0xFFFF
            if not is_trail_surrogate(trail):
                raise InvalidUtf16(trail)
            cp = 0x10000 + ((cp - LEAD_SURROGATE_MIN) << 10) + (trail - TRAIL_SURROGATE_MIN)
        elif is_trail_surrogate(cp):
            raise InvalidUtf16(cp)
        out += append(cp)
    return bytes(out)


def utf8to16(data: Sequence[int]) -> list[int]:
    """Transcode UTF-8 bytes to UTF-16 words."""
    words: list[int] = []
    pos = 0
    while pos < len(data):
        cp, pos = _next(data, pos)
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
        cp, pos = _next(data, pos)
        code_points.append(cp)
    return code_points


class Utf8Iterator:
    """Bidirectional cursor over the code points of a UTF-8 range."""

    def __init__(
        self,
        data: Sequence[int],
        position: int = 0,
        range_start: int = 0,
        range_end: int | None = None,
    ) -> None:
        if range_end is None:
            range_end = len(data)
        if position < range_start or position > range_end:
            raise IndexError("Invalid utf-8 iterator position")
        self._data = data
        self._position = position
        self._range_start = range_start
        self._range_end = range_end

    def base(self) -> int:
        """The underlying byte position."""
        return self._position

    def value(self) -> int:
        """The code point at the current position."""
        return _next(self._data, self._position, self._range_end)[0]

    def increment(self) -> Utf8Iterator:
        _, self._position = _next(self._data, self._position, self._range_end)
        return self

    def decrement(self) -> Utf8Iterator:
        _, self._position = prior(self._data, self._position, self._range_start)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Utf8Iterator):
            return NotImplemented
        if (self._range_start, self._range_end) != (other._range_start, other._range_end):
            raise ValueError("Comparing utf-8 iterators defined with different ranges")
        return self._position == other._position

    __hash__ = None  # type: ignore[assignment]