"""Value encoders.

Each concrete runtime type maps to one encoder function, picked once by
:func:`encoder_for` and memoized. Resolution order:

1. types with a ``marshal_text()`` method (:class:`TextMarshaler`);
2. ``None``: an absent optional value encodes to nothing;
3. dataclass records, encoded recursively into one line;
4. ``str``;
5. ``int`` and numpy integer scalars;
6. ``float`` and numpy floating scalars, two decimals;
7. anything else raises :class:`UnsupportedTypeError`.

``bool`` is deliberately not an ``int`` here.
"""

from __future__ import annotations

import dataclasses
import functools
import math
from typing import Any, Callable, Protocol, Union, runtime_checkable

import numpy as np

from ..logging import get_logger
from .compose import get_valid_chunk
from .constants import FLOAT_PRECISION, PAD_BYTE, TAG_KEY, UTF_MAX
from .errors import marshal_text_error, unsupported_type, value_range_error
from .layout import resolve_layout

__all__ = [
    "TextMarshaler",
    "ValueEncoder",
    "encoder_for",
    "encode_value",
    "encode_record",
]

ValueEncoder = Callable[[Any, str], bytes]


@runtime_checkable
class TextMarshaler(Protocol):
    def marshal_text(self) -> Union[bytes, str]: ...


def _utf8(text: str) -> bytes:
    # Lone surrogates from os.fsdecode and friends keep their raw bytes.
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def _nil_encoder(value: Any, tag_key: str) -> bytes:
    return b""


def _text_marshaler_encoder(value: Any, tag_key: str) -> bytes:
    result = value.marshal_text()
    if isinstance(result, str):
        return _utf8(result)
    if isinstance(result, (bytes, bytearray, memoryview)):
        return bytes(result)
    raise marshal_text_error(type(value), result)


def _string_encoder(value: Any, tag_key: str) -> bytes:
    return _utf8(str(value))


def _int_encoder(value: Any, tag_key: str) -> bytes:
    try:
        digits = str(int(value))
    except ValueError as e:
        # int -> str conversion limit (sys.set_int_max_str_digits)
        raise value_range_error(type(value), str(e)) from e
    return digits.encode("ascii")


def _float_encoder(value: Any, tag_key: str) -> bytes:
    f = float(value)
    if math.isnan(f):
        return b"NaN"
    if math.isinf(f):
        return b"+Inf" if f > 0 else b"-Inf"
    return f"{f:.{FLOAT_PRECISION}f}".encode("ascii")


def _unknown_type_encoder(tp: type) -> ValueEncoder:
    def encode(value: Any, tag_key: str) -> bytes:
        raise unsupported_type(tp)

    return encode


def encode_record(value: Any, tag_key: str = TAG_KEY) -> bytes:
    """Encode one dataclass instance into a single line (no terminator)."""
    layout = resolve_layout(type(value), tag_key)
    buf = bytearray(PAD_BYTE * (layout.line_length * UTF_MAX))
    cursor = 0

    for pos in layout.fields:
        if not pos.ok:
            continue

        raw = encode_value(getattr(value, pos.name), tag_key)
        chunk, padding = get_valid_chunk(raw, pos.numeric, pos.start, pos.end)

        # Overflowing numbers have negative padding: nothing is added and
        # every following field shifts right.
        end = cursor + len(chunk) + max(padding, 0)
        if end > len(buf):
            buf.extend(PAD_BYTE * (end - len(buf)))
        buf[cursor : cursor + len(chunk)] = chunk
        cursor = end

    return bytes(buf[:cursor])


def _record_encoder(value: Any, tag_key: str) -> bytes:
    return encode_record(value, tag_key)


@functools.lru_cache(maxsize=None)
def encoder_for(tp: type) -> ValueEncoder:
    if callable(getattr(tp, "marshal_text", None)):
        enc = _text_marshaler_encoder
    elif tp is type(None):
        enc = _nil_encoder
    elif dataclasses.is_dataclass(tp):
        enc = _record_encoder
    elif issubclass(tp, (bool, np.bool_)):
        enc = _unknown_type_encoder(tp)
    elif issubclass(tp, str):
        enc = _string_encoder
    elif issubclass(tp, (int, np.integer)):
        enc = _int_encoder
    elif issubclass(tp, (float, np.floating)):
        enc = _float_encoder
    else:
        enc = _unknown_type_encoder(tp)
    get_logger().debug(
        "encoder for %s: %s",
        getattr(tp, "__qualname__", tp),
        getattr(enc, "__qualname__", enc),
    )
    return enc


def encode_value(value: Any, tag_key: str = TAG_KEY) -> bytes:
    """Raw bytes for ``value`` before width handling."""
    return encoder_for(type(value))(value, tag_key)
