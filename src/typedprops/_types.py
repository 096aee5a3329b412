"""Type aliases for typedprops.

This module holds the flat pair aliases shared by the encoder, decoder and
text layer, plus the sized numeric aliases used to annotate dataclass
fields. It has no dependencies on other typedprops modules besides
_constants.py, so every module can safely import from _types.py.
"""

from dataclasses import dataclass
from typing import Annotated, TypeAlias

from ._constants import (
    MAX_INT8,
    MAX_INT16,
    MAX_INT32,
    MAX_INT64,
    MAX_UINT8,
    MAX_UINT16,
    MAX_UINT32,
    MAX_UINT64,
    MIN_INT8,
    MIN_INT16,
    MIN_INT32,
    MIN_INT64,
)

Pair: TypeAlias = "tuple[str, str]"
"""A single logical (key, value) entry of a properties document."""

PairSequence: TypeAlias = "list[tuple[str, str]]"
"""An ordered sequence of pairs, duplicates included, as read or written."""

FlatMapping: TypeAlias = "dict[str, str]"
"""Pairs folded into a lookup table where the last duplicate wins."""


@dataclass(frozen=True, slots=True)
class IntRange:
    """Bounds marker for a sized integer family."""

    name: str
    min_value: int
    max_value: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min_value <= value <= self.max_value


@dataclass(frozen=True, slots=True)
class FloatWidth:
    """Precision marker for a sized float family (32 or 64 bits)."""

    name: str
    bits: int


Int8: TypeAlias = Annotated[int, IntRange("i8", MIN_INT8, MAX_INT8)]
Int16: TypeAlias = Annotated[int, IntRange("i16", MIN_INT16, MAX_INT16)]
Int32: TypeAlias = Annotated[int, IntRange("i32", MIN_INT32, MAX_INT32)]
Int64: TypeAlias = Annotated[int, IntRange("i64", MIN_INT64, MAX_INT64)]
UInt8: TypeAlias = Annotated[int, IntRange("u8", 0, MAX_UINT8)]
UInt16: TypeAlias = Annotated[int, IntRange("u16", 0, MAX_UINT16)]
UInt32: TypeAlias = Annotated[int, IntRange("u32", 0, MAX_UINT32)]
UInt64: TypeAlias = Annotated[int, IntRange("u64", 0, MAX_UINT64)]

Float32: TypeAlias = Annotated[float, FloatWidth("f32", 32)]
Float64: TypeAlias = Annotated[float, FloatWidth("f64", 64)]
