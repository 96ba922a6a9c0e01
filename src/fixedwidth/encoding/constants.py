"""Constants shared by the fixed-width encoding engine."""

from __future__ import annotations

# Field metadata key carrying the "<start>,<end>" position annotation.
TAG_KEY = "fixed"

LINE_TERMINATOR = b"\n"
PAD_BYTE = b" "

# Longest UTF-8 sequence for a single code point.
UTF_MAX = 4

FLOAT_PRECISION = 2

DEFAULT_BUFFER_SIZE = 4096
BUFFER_SIZE_ENV = "FIXEDWIDTH_BUFFER_SIZE"

__all__ = [
    "TAG_KEY",
    "LINE_TERMINATOR",
    "PAD_BYTE",
    "UTF_MAX",
    "FLOAT_PRECISION",
    "DEFAULT_BUFFER_SIZE",
    "BUFFER_SIZE_ENV",
]
