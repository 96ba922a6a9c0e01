"""fixedwidth package

Encode dataclass records into fixed-width text lines for flat-file
interchange. Each field declares its column with a ``fixed`` metadata
entry of the form ``"<start>,<end>"`` (1-based, inclusive, in characters)::

    @dataclass
    class Person:
        name: str = fixed_field("1,5", default="")
        age: int = fixed_field("6,8", default=0)

    marshal(Person("Bob", 42))  # b"Bob  42 "
"""

from .api import Encoder, EncoderOptions, marshal, new_encoder
from .encoding.errors import (
    FixedWidthError,
    MarshalTextError,
    UnsupportedTypeError,
    ValueRangeError,
)
from .encoding.layout import (
    FieldPosition,
    LayoutSpec,
    clear_layout_cache,
    resolve_layout,
)
from .encoding.position import fixed_field, parse_position
from .encoding.values import TextMarshaler
from .encoding.writer import encode_line

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "marshal",
    "new_encoder",
    "Encoder",
    "EncoderOptions",
    "encode_line",
    "fixed_field",
    "parse_position",
    "resolve_layout",
    "clear_layout_cache",
    "LayoutSpec",
    "FieldPosition",
    "TextMarshaler",
    "FixedWidthError",
    "UnsupportedTypeError",
    "MarshalTextError",
    "ValueRangeError",
]
