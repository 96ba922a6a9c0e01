"""Position annotation parsing.

A position annotation is the string ``"<start>,<end>"`` stored in a
dataclass field's metadata. Positions are 1-based, inclusive and counted in
Unicode characters. Anything that does not parse marks the field as
excluded from encoding.
"""

from __future__ import annotations

import dataclasses
import re
from typing import Any, Optional, Tuple

from .constants import TAG_KEY

__all__ = ["parse_position", "fixed_field"]

_POSITION_RE = re.compile(r"([+-]?[0-9]+),([+-]?[0-9]+)")


def parse_position(tag: Optional[str]) -> Tuple[int, int, bool]:
    """Return ``(start, end, ok)`` for a position annotation."""
    if not tag or not isinstance(tag, str):
        return 0, 0, False
    m = _POSITION_RE.fullmatch(tag)
    if m is None:
        return 0, 0, False
    return int(m.group(1)), int(m.group(2)), True


def fixed_field(position: str, *, tag_key: str = TAG_KEY, **kwargs: Any):
    """``dataclasses.field`` carrying a position annotation.

    >>> @dataclass
    ... class Row:
    ...     name: str = fixed_field("1,10", default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[tag_key] = position
    return dataclasses.field(metadata=metadata, **kwargs)
