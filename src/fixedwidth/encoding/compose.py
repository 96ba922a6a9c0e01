"""Field composition: fit an encoded value into its column width."""

from __future__ import annotations

from typing import Tuple

__all__ = ["get_valid_chunk", "rune_length", "count_runes"]


def rune_length(buf: bytes, i: int) -> int:
    """Byte length of the UTF-8 character starting at ``buf[i]``.

    Invalid or truncated sequences count as a single byte.
    """
    lead = buf[i]
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        n = 2
    elif 0xE0 <= lead <= 0xEF:
        n = 3
    elif 0xF0 <= lead <= 0xF4:
        n = 4
    else:
        return 1
    if i + n > len(buf):
        return 1
    try:
        buf[i : i + n].decode("utf-8")
    except UnicodeDecodeError:
        return 1
    return n


def count_runes(buf: bytes) -> int:
    count = 0
    i = 0
    while i < len(buf):
        i += rune_length(buf, i)
        count += 1
    return count


def get_valid_chunk(
    val: bytes, numeric: bool, start: int, end: int
) -> Tuple[bytes, int]:
    """Return the bytes to place in the line and the spaces to add after.

    ``end < start`` means the field has no width: ``val`` is used as-is.
    Numeric values are never truncated; the filler count goes negative when
    they overflow and the caller does not compensate for it. Text is cut to
    at most ``end - start + 1`` characters without splitting a multi-byte
    sequence.
    """
    if end < start:
        return val, 0

    width = end - start + 1

    if numeric:
        return val, width - count_runes(val)

    size = 0
    kept = 0
    while kept < width and size < len(val):
        size += rune_length(val, size)
        kept += 1

    return val[:size], width - kept
