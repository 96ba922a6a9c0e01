"""Line/stream writer.

An :class:`Encoder` turns a record (or a list/tuple of records) into
fixed-width lines and writes them to a binary sink. Lines are separated by
a terminator; there is no terminator after the last line. Output is held in
an internal buffer and the sink is flushed once per :meth:`Encoder.encode`
call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Optional, Sequence

from ..logging import get_logger
from .constants import (
    BUFFER_SIZE_ENV,
    DEFAULT_BUFFER_SIZE,
    LINE_TERMINATOR,
    TAG_KEY,
)
from .values import encode_value

__all__ = ["EncoderOptions", "Encoder", "encode_line"]


def _default_buffer_size() -> int:
    raw = os.getenv(BUFFER_SIZE_ENV)
    if not raw:
        return DEFAULT_BUFFER_SIZE
    try:
        size = int(raw)
    except ValueError:
        get_logger().warning(
            "ignoring %s=%r: not an integer", BUFFER_SIZE_ENV, raw
        )
        return DEFAULT_BUFFER_SIZE
    return max(1, size)


@dataclass(slots=True)
class EncoderOptions:
    # Field metadata key holding "<start>,<end>"
    tag_key: str = TAG_KEY
    line_terminator: bytes = LINE_TERMINATOR
    # Bytes held back before writing through to the sink
    buffer_size: int = field(default_factory=_default_buffer_size)


def encode_line(value: Any, tag_key: str = TAG_KEY) -> bytes:
    """Encode a single value as one line, without touching any sink."""
    return encode_value(value, tag_key)


class Encoder:
    """Writes fixed-width lines to ``sink``."""

    def __init__(
        self, sink: BinaryIO, options: Optional[EncoderOptions] = None
    ):
        self.sink = sink
        self.options = options or EncoderOptions()
        self._buf = bytearray()

    def encode(self, value: Any) -> None:
        """Encode ``value`` and flush.

        ``None`` writes nothing. A list or tuple is written one element per
        line. On error, output still held in the internal buffer is dropped;
        anything already written through to the sink stays there.
        """
        if value is None:
            return

        try:
            if isinstance(value, (list, tuple)):
                count = self._write_lines(value)
            else:
                self._write_line(value)
                count = 1
        except Exception:
            self._buf.clear()
            raise

        self.flush()
        get_logger().debug(
            "encoded %d line(s) from %s", count, type(value).__qualname__
        )

    def flush(self) -> None:
        self._drain()
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def _write_lines(self, values: Sequence[Any]) -> int:
        last = len(values) - 1
        for i, item in enumerate(values):
            self._write_line(item)
            if i != last:
                self._write(self.options.line_terminator)
        return len(values)

    def _write_line(self, value: Any) -> None:
        self._write(encode_line(value, self.options.tag_key))

    def _write(self, data: bytes) -> None:
        self._buf += data
        if len(self._buf) >= self.options.buffer_size:
            self._drain()

    def _drain(self) -> None:
        if not self._buf:
            return
        data = bytes(self._buf)
        self._buf.clear()
        self.sink.write(data)
