"""Typed encoding and decoding of Java .properties documents."""

import logging
from importlib.metadata import version

from ._codec import dump, dumpb, dumps, load, loadb, loads
from ._decoder import flatten_pairs, from_mapping
from ._encoder import to_pairs
from ._exceptions import (
    ConversionError,
    FieldTypeError,
    InvalidBooleanError,
    InvalidFloatError,
    InvalidIntegerError,
    InvalidKeyError,
    InvalidSeparatorError,
    MissingFieldError,
    PropertiesError,
    UnknownVariantError,
    UnsupportedFieldTypeError,
    UnsupportedRootTypeError,
    UnsupportedTypeError,
)
from ._field import decode_field, encode_field
from ._reader import parse_pairs
from ._types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)
from ._writer import LineEnding, PropertiesWriter

__version__ = version("typedprops")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConversionError",
    "FieldTypeError",
    "Float32",
    "Float64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "InvalidBooleanError",
    "InvalidFloatError",
    "InvalidIntegerError",
    "InvalidKeyError",
    "InvalidSeparatorError",
    "LineEnding",
    "MissingFieldError",
    "PropertiesError",
    "PropertiesWriter",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UnknownVariantError",
    "UnsupportedFieldTypeError",
    "UnsupportedRootTypeError",
    "UnsupportedTypeError",
    "__version__",
    "decode_field",
    "dump",
    "dumpb",
    "dumps",
    "encode_field",
    "flatten_pairs",
    "from_mapping",
    "load",
    "loadb",
    "loads",
    "parse_pairs",
    "to_pairs",
]
