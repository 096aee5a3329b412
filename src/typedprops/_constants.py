"""Constants for typedprops."""

from typing import Final

# Text layer defaults
DEFAULT_SEPARATOR: Final = "="
DEFAULT_ENCODING: Final = "iso-8859-1"

# Characters the .properties grammar treats as blanks inside a separator
SEPARATOR_BLANKS: Final = " \t\f"

# Integer bounds per sized family
MIN_INT8: Final = -(2**7)
MAX_INT8: Final = 2**7 - 1
MIN_INT16: Final = -(2**15)
MAX_INT16: Final = 2**15 - 1
MIN_INT32: Final = -(2**31)
MAX_INT32: Final = 2**31 - 1
MIN_INT64: Final = -(2**63)
MAX_INT64: Final = 2**63 - 1
MAX_UINT8: Final = 2**8 - 1
MAX_UINT16: Final = 2**16 - 1
MAX_UINT32: Final = 2**32 - 1
MAX_UINT64: Final = 2**64 - 1

# Smallest magnitude that rounds to infinity in single precision: halfway
# between the largest finite float32, 2**128 - 2**104, and 2**128.
FLOAT32_OVERFLOW: Final = 2.0**128 - 2.0**103
