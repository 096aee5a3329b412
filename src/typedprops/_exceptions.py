"""Exception hierarchy for typedprops.

All exceptions derive from PropertiesError, so callers can catch every codec
failure with one clause. Each concrete class also derives from the builtin
exception that best describes it (TypeError for unsupported shapes,
ValueError for bad text, KeyError for absent fields).
"""

__all__ = [
    "ConversionError",
    "FieldTypeError",
    "InvalidBooleanError",
    "InvalidFloatError",
    "InvalidIntegerError",
    "InvalidKeyError",
    "InvalidSeparatorError",
    "MissingFieldError",
    "PropertiesError",
    "UnknownVariantError",
    "UnsupportedFieldTypeError",
    "UnsupportedRootTypeError",
    "UnsupportedTypeError",
]


class PropertiesError(Exception):
    """Base class for all typedprops errors."""


class UnsupportedTypeError(PropertiesError, TypeError):
    """A value or type cannot be expressed in the flat properties format."""


class UnsupportedRootTypeError(UnsupportedTypeError):
    """A shape was used where only a document root or only a field is legal.

    Raised for bare primitives at the document root and for compound values
    (structs, maps, tagged unions) nested inside a field.
    """


class UnsupportedFieldTypeError(UnsupportedTypeError):
    """A field value has a type the field codec has no string form for."""


class InvalidKeyError(PropertiesError, ValueError):
    """A key is empty."""


class InvalidSeparatorError(PropertiesError, ValueError):
    """A key/value separator is not valid properties syntax."""


class MissingFieldError(PropertiesError, KeyError):
    """A required struct field has no key in the input.

    Attributes:
        name: The key that was looked up.
    """

    def __init__(self, name: str) -> None:
        self.name: str = name
        super().__init__(f"missing field: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class ConversionError(PropertiesError, ValueError):
    """A raw string could not be converted to the requested field type.

    Attributes:
        raw: The offending text.
        expected: Human readable name of the requested type.
    """

    def __init__(self, raw: str, expected: str, message: str | None = None) -> None:
        self.raw: str = raw
        self.expected: str = expected
        if message is None:
            message = f"invalid {expected}: {raw!r}"
        super().__init__(message)


class InvalidBooleanError(ConversionError):
    """Text is not exactly ``true`` or ``false``."""

    def __init__(self, raw: str) -> None:
        super().__init__(raw, "bool", f"invalid boolean: {raw!r}")


class InvalidIntegerError(ConversionError):
    """Text is not a base-10 integer, or is out of range for its family."""


class InvalidFloatError(ConversionError):
    """Text is not a floating point literal, or is out of range for its family."""


class UnknownVariantError(ConversionError):
    """Text does not name a declared variant (case-sensitive).

    Attributes:
        name: The variant name that was not found.
    """

    def __init__(self, name: str, expected: str) -> None:
        self.name: str = name
        super().__init__(name, expected, f"unknown variant {name!r} for {expected}")


class FieldTypeError(PropertiesError, ValueError):
    """A present value failed to convert to its declared field type.

    The specific ConversionError is attached as ``__cause__``.

    Attributes:
        name: The key of the field.
        raw: The offending text.
        expected: Human readable name of the declared type.
    """

    def __init__(self, name: str, raw: str, expected: str) -> None:
        self.name: str = name
        self.raw: str = raw
        self.expected: str = expected
        super().__init__(f"field {name!r}: cannot convert {raw!r} to {expected}")
