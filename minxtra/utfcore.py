"""Core UTF-8 and UTF-16 helpers: classification, validation and encoding."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

LEAD_SURROGATE_MIN = 0xD800
LEAD_SURROGATE_MAX = 0xDBFF
TRAIL_SURROGATE_MIN = 0xDC00
TRAIL_SURROGATE_MAX = 0xDFFF
LEAD_OFFSET = 0xD7C0
CODE_POINT_MAX = 0x10FFFF

BOM = bytes((0xEF, 0xBB, 0xBF))

# Bits of the lead octet that carry payload, by sequence length.
_LEAD_PAYLOAD_MASK = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


class UtfError(enum.Enum):
    """Outcome of decoding one sequence."""

    OK = enum.auto()
    NOT_ENOUGH_ROOM = enum.auto()
    INVALID_LEAD = enum.auto()
    INCOMPLETE_SEQUENCE = enum.auto()
    OVERLONG_SEQUENCE = enum.auto()
    INVALID_CODE_POINT = enum.auto()


@dataclass(frozen=True)
class Decoded:
    """Result of decoding one sequence.

    On success ``position`` is the index just past the sequence; on failure it
    is the index the decoding started from and ``code_point`` is 0.
    """

    error: UtfError
    code_point: int
    position: int

    @property
    def ok(self) -> bool:
        return self.error is UtfError.OK


def is_trail(octet: int) -> bool:
    """Whether the octet is a UTF-8 continuation byte."""
    return ((octet & 0xFF) >> 6) == 0x2


def is_lead_surrogate(cp: int) -> bool:
    return LEAD_SURROGATE_MIN <= cp <= LEAD_SURROGATE_MAX


def is_trail_surrogate(cp: int) -> bool:
    return TRAIL_SURROGATE_MIN <= cp <= TRAIL_SURROGATE_MAX


def is_surrogate(cp: int) -> bool:
    return LEAD_SURROGATE_MIN <= cp <= TRAIL_SURROGATE_MAX


def is_code_point_valid(cp: int) -> bool:
    return cp <= CODE_POINT_MAX and not is_surrogate(cp)


def is_in_bmp(cp: int) -> bool:
    return cp < 0x10000


def sequence_length(lead: int) -> int:
    """Length of the sequence started by ``lead``, or 0 for an invalid lead."""
    lead &= 0xFF
    if lead < 0x80:
        return 1
    if (lead >> 5) == 0x6:
        return 2
    if (lead >> 4) == 0xE:
        return 3
    if (lead >> 3) == 0x1E:
        return 4
    return 0


def is_overlong_sequence(cp: int, length: int) -> bool:
    if cp < 0x80:
        return length != 1
    if cp < 0x800:
        return length != 2
    if cp < 0x10000:
        return length != 3
    return False


def validate_next(data: Sequence[int], pos: int = 0) -> Decoded:
    """Decode the UTF-8 sequence of ``data`` starting at ``pos``."""
    if pos >= len(data):
        return Decoded(UtfError.NOT_ENOUGH_ROOM, 0, pos)

    lead = data[pos] & 0xFF
    length = sequence_length(lead)
    if length == 0:
        return Decoded(UtfError.INVALID_LEAD, 0, pos)

    trail = data[pos + 1 : pos + length]
    if not all(is_trail(octet) for octet in trail):
        return Decoded(UtfError.INCOMPLETE_SEQUENCE, 0, pos)
    if len(trail) < length - 1:
        return Decoded(UtfError.NOT_ENOUGH_ROOM, 0, pos)

    cp = lead & _LEAD_PAYLOAD_MASK[length]
    for octet in trail:
        cp = (cp << 6) | (octet & 0x3F)

    if not is_code_point_valid(cp):
        return Decoded(UtfError.INVALID_CODE_POINT, 0, pos)
    if is_overlong_sequence(cp, length):
        return Decoded(UtfError.OVERLONG_SEQUENCE, 0, pos)
    return Decoded(UtfError.OK, cp, pos + length)


def validate_next16(words: Sequence[int], pos: int = 0) -> Decoded:
    """Decode the UTF-16 sequence of ``words`` starting at ``pos``."""
    if pos >= len(words):
        return Decoded(UtfError.NOT_ENOUGH_ROOM, 0, pos)

    first = words[pos] & 0xFFFF
    if not is_surrogate(first):
        return Decoded(UtfError.OK, first, pos + 1)
    if pos + 1 >= len(words):
        return Decoded(UtfError.NOT_ENOUGH_ROOM, 0, pos)
    if not is_lead_surrogate(first):
        return Decoded(UtfError.INVALID_LEAD, 0, pos)

    second = words[pos + 1] & 0xFFFF
    if not is_trail_surrogate(second):
        return Decoded(UtfError.INCOMPLETE_SEQUENCE, 0, pos)
    cp = 0x10000 + ((first - LEAD_SURROGATE_MIN) << 10) + (second - TRAIL_SURROGATE_MIN)
    return Decoded(UtfError.OK, cp, pos + 2)


def encode_code_point(cp: int) -> bytes:
    """Encode ``cp`` as UTF-8 without checking that it is valid."""
    if cp < 0x80:
        octets = (cp,)
    elif cp < 0x800:
        octets = ((cp >> 6) | 0xC0, (cp & 0x3F) | 0x80)
    elif cp < 0x10000:
        octets = (
            (cp >> 12) | 0xE0,
            ((cp >> 6) & 0x3F) | 0x80,
            (cp & 0x3F) | 0x80,
        )
    else:
        octets = (
            (cp >> 18) | 0xF0,
            ((cp >> 12) & 0x3F) | 0x80,
            ((cp >> 6) & 0x3F) | 0x80,
            (cp & 0x3F) | 0x80,
        )
    return bytes(octet & 0xFF for octet in octets)


def encode_code_point16(cp: int) -> tuple[int, ...]:
    """Encode ``cp`` as UTF-16 words without checking that it is valid."""
    if is_in_bmp(cp):
        return (cp & 0xFFFF,)
    return (
        (LEAD_OFFSET + (cp >> 10)) & 0xFFFF,
        (TRAIL_SURROGATE_MIN + (cp & 0x3FF)) & 0xFFFF,
    )


def find_invalid(data: Sequence[int]) -> int | None:
    """Index of the first invalid sequence, or None if all of ``data`` is valid."""
    pos = 0
    while pos < len(data):
        decoded = validate_next(data, pos)
        if not decoded.ok:
            return pos
        pos = decoded.position
    return None


def is_valid(data: Sequence[int]) -> bool:
    return find_invalid(data) is None


def starts_with_bom(data: Sequence[int]) -> bool:
    head = data[: len(BOM)]
    return len(head) == len(BOM) and all(
        (octet & 0xFF) == mark for octet, mark in zip(head, BOM)
    )