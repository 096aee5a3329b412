"""Field codec: one leaf value to and from exactly one string.

Conversions are atomic. A value either converts fully or a ConversionError
subclass is raised carrying the raw text and the expected type name.
"""

import enum
import math
import re
import struct
from typing import Any

from ._constants import FLOAT32_OVERFLOW
from ._exceptions import (
    InvalidBooleanError,
    InvalidFloatError,
    InvalidIntegerError,
    UnknownVariantError,
    UnsupportedFieldTypeError,
    UnsupportedRootTypeError,
)
from ._shapes import (
    describe_type,
    describe_value,
    field_metadata,
    is_compound_value,
    is_enum_type,
    is_field_type,
    strip_annotated,
    unwrap_optional,
)
from ._types import FloatWidth, IntRange

__all__ = ["decode_field", "encode_field", "infer_field"]

# ASCII digits only; int() and float() would also accept underscores,
# surrounding whitespace and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def encode_field(value: object, hint: object = None) -> str:
    """Convert a field value to its properties string.

    Args:
        value: A bool, int, float, str or Enum member.
        hint: The declared type of the field. When given, the value must be
            an instance of it (an int is accepted for a float) and sized
            numeric aliases are range checked. May be None when no
            declaration is known.

    Returns:
        The encoded string.

    Raises:
        UnsupportedRootTypeError: If the value is a struct, map or sequence.
        UnsupportedFieldTypeError: If the value has no string form or does
            not match the declared type.
        InvalidIntegerError: If an int does not fit its sized family.
        InvalidFloatError: If a float does not fit its sized family.
    """
    if value is None:
        msg = "None has no string form; absent fields are omitted"
        raise UnsupportedFieldTypeError(msg)
    if is_compound_value(value):
        msg = (
            f"cannot encode {describe_value(value)} as a field value; "
            "nested structures are not supported"
        )
        raise UnsupportedRootTypeError(msg)

    inner = unwrap_optional(hint)[0]
    marker = field_metadata(inner)
    base, _ = strip_annotated(inner)
    if base is not None and base is not Any and base is not object:
        value = _match_declared(value, base)

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return value.name
    if isinstance(value, int):
        if isinstance(marker, IntRange) and value not in marker:
            msg = f"{value} out of range for {marker.name}"
            raise InvalidIntegerError(str(value), marker.name, msg)
        return str(value)
    if isinstance(value, float):
        if isinstance(marker, FloatWidth) and marker.bits == 32:
            _ = _to_float32(value, repr(value))
        return repr(value)
    if isinstance(value, str):
        return value

    msg = f"cannot encode {describe_value(value)} as a field value"
    raise UnsupportedFieldTypeError(msg)


def decode_field(raw: str, hint: object) -> object:
    """Convert a properties string to a value of the declared field type.

    An empty string decodes to None when the type is Optional.

    Raises:
        InvalidBooleanError: If a bool is not exactly ``true`` or ``false``.
        InvalidIntegerError: If an int is malformed or out of range.
        InvalidFloatError: If a float is malformed or out of range.
        UnknownVariantError: If an Enum has no member of that name.
        UnsupportedFieldTypeError: If the hint is not a field type.
    """
    inner, optional = unwrap_optional(hint)
    if optional and raw == "":
        return None

    base, _ = strip_annotated(inner)
    marker = field_metadata(inner)
    if base is Any or base is object:
        return infer_field(raw)
    if base is bool:
        return _parse_bool(raw)
    if base is int:
        return _parse_int(raw, marker if isinstance(marker, IntRange) else None)
    if base is float:
        return _parse_float(raw, marker if isinstance(marker, FloatWidth) else None)
    if base is str:
        return raw
    if is_enum_type(base):
        return _parse_enum(raw, base)

    msg = f"no field conversion for type {base!r}"
    raise UnsupportedFieldTypeError(msg)


def infer_field(raw: str) -> int | bool | float | str:
    """Guess the type of an undeclared value.

    Tries an integer, then a boolean literal, then a float, and falls back to
    the string itself.
    """
    if _INTEGER_RE.fullmatch(raw):
        return int(raw)
    if raw == "true":
        return True
    if raw == "false":
        return False
    if _FLOAT_RE.fullmatch(raw):
        return float(raw)
    return raw


def _match_declared(value: object, base: object) -> object:
    if base is float and isinstance(value, int) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError as e:
            msg = f"{value} out of range for float"
            raise InvalidFloatError(str(value), "float", msg) from e
    if not is_field_type(base):
        msg = f"no field conversion for type {describe_type(base)}"
        raise UnsupportedFieldTypeError(msg)
    matches = isinstance(value, base)
    # bool and IntEnum members are ints but encode as literals an int field rejects
    if isinstance(value, (bool, enum.Enum)) and not (base is bool or is_enum_type(base)):
        matches = False
    if not matches:
        msg = f"cannot encode {describe_value(value)} {value!r} as {describe_type(base)}"
        raise UnsupportedFieldTypeError(msg)
    return value


def _parse_bool(raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidBooleanError(raw)


def _parse_int(raw: str, marker: IntRange | None) -> int:
    expected = marker.name if marker is not None else "int"
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidIntegerError(raw, expected)
    value = int(raw)
    if marker is not None and value not in marker:
        msg = f"{raw!r} out of range for {expected}"
        raise InvalidIntegerError(raw, expected, msg)
    return value


def _parse_float(raw: str, marker: FloatWidth | None) -> float:
    expected = marker.name if marker is not None else "float"
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidFloatError(raw, expected)
    value = float(raw)
    if marker is not None and marker.bits == 32:
        return _to_float32(value, raw)
    return value


def _to_float32(value: float, raw: str) -> float:
    """Round to single precision, rejecting finite values beyond its range."""
    if not math.isfinite(value):
        return value
    if abs(value) >= FLOAT32_OVERFLOW:
        msg = f"{raw!r} out of range for f32"
        raise InvalidFloatError(raw, "f32", msg)
    return struct.unpack("f", struct.pack("f", value))[0]


def _parse_enum(raw: str, cls: type[enum.Enum]) -> enum.Enum:
    member = cls.__members__.get(raw)
    if member is None:
        raise UnknownVariantError(raw, cls.__name__)
    return member
