"""High-level API for fixedwidth."""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Optional

from .encoding.writer import Encoder, EncoderOptions

__all__ = [
    "marshal",
    "new_encoder",
    "Encoder",
    "EncoderOptions",
]


def marshal(value: Any, options: Optional[EncoderOptions] = None) -> bytes:
    """Return the fixed-width encoding of ``value``.

    ``value`` is a record (a dataclass whose fields carry ``fixed``
    position metadata), any other encodable value, or a list/tuple of them,
    one line each. ``None`` encodes to ``b""``.
    """
    buf = io.BytesIO()
    new_encoder(buf, options).encode(value)
    return buf.getvalue()


def new_encoder(
    sink: BinaryIO, options: Optional[EncoderOptions] = None
) -> Encoder:
    return Encoder(sink, options)
