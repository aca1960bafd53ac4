"""Transcoding between UTF-16 word sequences and UTF-8 bytes."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from minxtra.utfchecked import utf8to16, utf16to8


def _words_of(text: str) -> list[int]:
    encoded = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(encoded) // 2}H", encoded))


def _until_zero(units: Sequence[int]) -> Sequence[int]:
    for index, unit in enumerate(units):
        if unit == 0:
            return units[:index]
    return units


def to_utf8(utf16: str | Sequence[int], count: int | None = None) -> bytes:
    """Transcode UTF-16 text to UTF-8.

    ``utf16`` is a sequence of UTF-16 words or a str. Without ``count`` the
    text ends at the first zero word; with it, exactly ``count`` words are used.
    """
    words = _words_of(utf16) if isinstance(utf16, str) else utf16
    words = _until_zero(words) if count is None else words[:count]
    return utf16to8(words)


def to_utf16(utf8: str | bytes | Sequence[int], count: int | None = None) -> list[int]:
    """Transcode UTF-8 text to UTF-16 words.

    ``utf8`` is UTF-8 bytes or a str. Without ``count`` the text ends at the
    first zero byte; with it, exactly ``count`` bytes are used.
    """
    data = utf8.encode("utf-8") if isinstance(utf8, str) else utf8
    data = _until_zero(data) if count is None else data[:count]
    return utf8to16(data)