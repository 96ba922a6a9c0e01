"""Error definitions for the fixed-width encoder."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_UNSUPPORTED_TYPE = "E_UNSUPPORTED_TYPE"
E_MARSHAL_TEXT = "E_MARSHAL_TEXT"
E_VALUE_RANGE = "E_VALUE_RANGE"


@dataclass
class FixedWidthError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.message} [{self.code}]"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class UnsupportedTypeError(FixedWidthError):
    """No encoding strategy exists for a value's type."""

    @property
    def type_name(self) -> str:
        return (self.context or {}).get("type", "")


class MarshalTextError(FixedWidthError):
    """A ``marshal_text`` hook returned something other than text."""


class ValueRangeError(FixedWidthError):
    """A value cannot be written as text at all (e.g. too many digits)."""


def unsupported_type(tp: type) -> UnsupportedTypeError:
    name = getattr(tp, "__qualname__", None) or repr(tp)
    return UnsupportedTypeError(
        code=E_UNSUPPORTED_TYPE,
        message=f"fixedwidth: cannot marshal unknown type {name}",
        context={"type": name},
    )


def marshal_text_error(tp: type, result: Any) -> MarshalTextError:
    name = getattr(tp, "__qualname__", None) or repr(tp)
    return MarshalTextError(
        code=E_MARSHAL_TEXT,
        message=(
            f"{name}.marshal_text returned {type(result).__name__}, "
            "expected bytes or str"
        ),
        context={"type": name, "result_type": type(result).__name__},
    )


def value_range_error(tp: type, reason: str) -> ValueRangeError:
    name = getattr(tp, "__qualname__", None) or repr(tp)
    return ValueRangeError(
        code=E_VALUE_RANGE,
        message=f"fixedwidth: cannot marshal {name} value: {reason}",
        context={"type": name},
    )


__all__ = [
    "FixedWidthError",
    "UnsupportedTypeError",
    "MarshalTextError",
    "ValueRangeError",
    "unsupported_type",
    "marshal_text_error",
    "value_range_error",
    "E_UNSUPPORTED_TYPE",
    "E_MARSHAL_TEXT",
    "E_VALUE_RANGE",
]
