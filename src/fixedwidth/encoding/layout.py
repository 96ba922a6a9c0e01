"""Per-record-type layout resolution and cache.

A layout is derived from a dataclass' fields in declaration order. Each
field contributes one :class:`FieldPosition`; the line length is the
largest end position. Positions only size fields and the line buffer, the
writer never seeks: fields are laid down one after another in the order
they are declared, so declaration order must match column order.
"""

from __future__ import annotations

import dataclasses
import threading
import typing
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from ..logging import get_logger
from .constants import TAG_KEY
from .position import parse_position

__all__ = [
    "FieldPosition",
    "LayoutSpec",
    "build_layout",
    "resolve_layout",
    "clear_layout_cache",
    "layout_cache_size",
    "is_numeric_type",
]

_NUMERIC_TYPES = (int, float, np.integer, np.floating)
_NUMERIC_NAMES = frozenset({"int", "float"})


@dataclass(frozen=True, slots=True)
class FieldPosition:
    name: str
    start: int = 0
    end: int = 0
    ok: bool = False
    numeric: bool = False

    @property
    def bounded(self) -> bool:
        return self.end >= self.start

    @property
    def width(self) -> int:
        return self.end - self.start + 1 if self.bounded else 0


@dataclass(frozen=True, slots=True)
class LayoutSpec:
    line_length: int
    fields: Tuple[FieldPosition, ...]

    @property
    def excluded(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if not f.ok)


def is_numeric_type(tp: Any) -> bool:
    """True when a declared annotation puts a field in the numeric class."""
    if isinstance(tp, str):
        return tp in _NUMERIC_NAMES
    if not isinstance(tp, type) or issubclass(tp, bool):
        return False
    return issubclass(tp, _NUMERIC_TYPES)


def _field_hint(cls: type, f: dataclasses.Field) -> Any:
    holder = type(
        cls.__name__,
        (),
        {"__annotations__": {f.name: f.type}, "__module__": cls.__module__},
    )
    try:
        return typing.get_type_hints(holder)[f.name]
    except (NameError, TypeError, AttributeError):
        return f.type


def _declared_types(cls: type) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError, AttributeError):
        # Names local to a function cannot be resolved; retry field by
        # field so only the unresolvable ones keep their raw annotation.
        return {f.name: _field_hint(cls, f) for f in dataclasses.fields(cls)}


def build_layout(cls: type, tag_key: str = TAG_KEY) -> LayoutSpec:
    hints = _declared_types(cls)
    positions = []
    line_length = 0
    for f in dataclasses.fields(cls):
        start, end, ok = parse_position(f.metadata.get(tag_key))
        positions.append(
            FieldPosition(
                name=f.name,
                start=start,
                end=end,
                ok=ok,
                numeric=is_numeric_type(hints.get(f.name, f.type)),
            )
        )
        if end > line_length:
            line_length = end
    return LayoutSpec(line_length=line_length, fields=tuple(positions))


_layout_cache: Dict[Tuple[type, str], LayoutSpec] = {}
_layout_lock = threading.Lock()


def resolve_layout(cls: type, tag_key: str = TAG_KEY) -> LayoutSpec:
    """Cached :func:`build_layout`; the first stored result wins."""
    key = (cls, tag_key)
    spec = _layout_cache.get(key)
    if spec is not None:
        return spec
    built = build_layout(cls, tag_key)
    with _layout_lock:
        spec = _layout_cache.setdefault(key, built)
    if spec is built:
        get_logger().debug(
            "layout %s: line_length=%d fields=%d excluded=%s",
            cls.__qualname__,
            spec.line_length,
            len(spec.fields),
            list(spec.excluded),
        )
    return spec


def clear_layout_cache() -> None:
    with _layout_lock:
        _layout_cache.clear()


def layout_cache_size() -> int:
    return len(_layout_cache)
