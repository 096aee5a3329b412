"""Type hint introspection.

The properties format has two grammars: what may form a whole document (a
dataclass, a mapping, a union of dataclasses, or an optional of these) and
what may form a single field value (a primitive, an Enum, Any, or an
optional of these). This module classifies type hints and runtime values
into those grammars and builds the per-dataclass field tables used by the
encoder and decoder.
"""

import dataclasses
import enum
import types
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any, Union, get_args, get_origin, get_type_hints

from ._exceptions import InvalidKeyError, UnsupportedFieldTypeError, UnsupportedRootTypeError
from ._types import FloatWidth, IntRange

__all__ = [
    "FieldSpec",
    "check_tag_key",
    "describe_type",
    "describe_value",
    "field_metadata",
    "is_compound_value",
    "is_enum_type",
    "is_field_type",
    "is_root_type",
    "map_types",
    "strip_annotated",
    "struct_fields",
    "union_variants",
    "unwrap_optional",
]

_MAPPING_ORIGINS = (dict, Mapping, MutableMapping)
_PRIMITIVES = (bool, int, float, str)
_NONE_TYPE = type(None)


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One declared field of a dataclass, as seen by the codec.

    Attributes:
        name: The attribute name on the dataclass.
        key: The properties key the field is stored under.
        hint: The field's type hint with Optional stripped.
        optional: Whether the declared type admits None.
        has_default: Whether the dataclass supplies a default value.
    """

    name: str
    key: str
    hint: object
    optional: bool
    has_default: bool


def unwrap_optional(hint: object) -> tuple[object, bool]:
    """Strip ``None`` from a union hint.

    Returns:
        A tuple of the remaining hint and whether None was present.
    """
    if not _is_union(hint):
        return hint, False
    args = get_args(hint)
    rest = tuple(arg for arg in args if arg is not _NONE_TYPE)
    if len(rest) == len(args):
        return hint, False
    if len(rest) == 1:
        return rest[0], True
    return Union[rest], True


def _is_union(hint: object) -> bool:
    origin = get_origin(hint)
    return origin is Union or origin is types.UnionType


def strip_annotated(hint: object) -> tuple[object, tuple[object, ...]]:
    """Split an ``Annotated`` hint into its base type and metadata."""
    if get_origin(hint) is Annotated:
        args = get_args(hint)
        return args[0], tuple(getattr(hint, "__metadata__", ()))
    return hint, ()


def field_metadata(hint: object) -> IntRange | FloatWidth | None:
    """Return the sized numeric marker attached to a hint, if any."""
    _, metadata = strip_annotated(hint)
    for item in metadata:
        if isinstance(item, (IntRange, FloatWidth)):
            return item
    return None


def _is_class(hint: object) -> bool:
    # list[int] passes isinstance(..., type) on some versions
    return isinstance(hint, type) and not isinstance(hint, types.GenericAlias)


def is_enum_type(hint: object) -> bool:
    return _is_class(hint) and issubclass(hint, enum.Enum)


def is_field_type(hint: object) -> bool:
    """Check if a hint belongs to the field grammar."""
    inner, _ = unwrap_optional(hint)
    base, _ = strip_annotated(inner)
    if base is Any or base is object:
        return True
    if base in _PRIMITIVES:
        return True
    return is_enum_type(base)


def map_types(hint: object) -> tuple[object, object] | None:
    """Return ``(key_hint, value_hint)`` for a mapping hint, else None.

    A bare ``dict`` or ``Mapping`` stands for ``dict[str, str]``.
    """
    if hint in _MAPPING_ORIGINS:
        return str, str
    if get_origin(hint) in _MAPPING_ORIGINS:
        args = get_args(hint)
        if len(args) == 2:
            return args[0], args[1]
        return str, str
    return None


def union_variants(hint: object) -> tuple[type, ...] | None:
    """Return the dataclasses of a tagged union hint ``A | B``, else None."""
    if not _is_union(hint):
        return None
    args = get_args(hint)
    if all(_is_class(arg) and dataclasses.is_dataclass(arg) for arg in args):
        return args
    return None


def is_root_type(hint: object) -> bool:
    """Check if a hint belongs to the root grammar."""
    inner, _ = unwrap_optional(hint)
    if _is_class(inner) and dataclasses.is_dataclass(inner):
        return True
    return map_types(inner) is not None or union_variants(inner) is not None


def describe_type(hint: object) -> str:
    """Return a short human readable name for a hint."""
    inner, optional = unwrap_optional(hint)
    if optional:
        return f"Optional[{describe_type(inner)}]"
    marker = field_metadata(inner)
    if marker is not None:
        return marker.name
    base, _ = strip_annotated(inner)
    if base is Any or base is object:
        return "Any"
    variants = union_variants(base)
    if variants is not None:
        return " | ".join(variant.__name__ for variant in variants)
    kv = map_types(base)
    if kv is not None:
        return f"Mapping[{describe_type(kv[0])}, {describe_type(kv[1])}]"
    if isinstance(base, type):
        return base.__name__
    return repr(base)


def describe_value(value: object) -> str:
    """Return the shape name of a runtime value for error messages."""
    if value is None:
        return "None"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return f"struct {type(value).__name__}"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, enum.Enum):
        return f"enum {type(value).__name__}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"sequence {type(value).__name__}"
    return type(value).__name__


def is_compound_value(value: object) -> bool:
    """Check if a runtime value is a struct, map or sequence."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


@lru_cache(maxsize=256)
def struct_fields(cls: type) -> tuple[FieldSpec, ...]:
    """Build the field table of a dataclass in declaration order.

    Only fields accepted by ``__init__`` take part. A field's key defaults to
    its name and may be overridden with ``field(metadata={"key": ...})``.

    Raises:
        UnsupportedRootTypeError: If a field is itself a struct, map or
            tagged union.
        UnsupportedFieldTypeError: If a field has no string form.
    """
    hints = get_type_hints(cls, include_extras=True)
    specs: list[FieldSpec] = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        hint = hints.get(f.name, Any)
        if not is_field_type(hint):
            if is_root_type(hint):
                msg = (
                    f"field {f.name!r} of {cls.__name__} has compound type "
                    f"{describe_type(hint)}; nested structures are not supported"
                )
                raise UnsupportedRootTypeError(msg)
            msg = f"field {f.name!r} of {cls.__name__} has unsupported type {describe_type(hint)}"
            raise UnsupportedFieldTypeError(msg)
        inner, optional = unwrap_optional(hint)
        has_default = (
            f.default is not dataclasses.MISSING
            or f.default_factory is not dataclasses.MISSING
        )
        key = f.metadata.get("key", f.name)
        specs.append(FieldSpec(f.name, key, inner, optional, has_default))
    return tuple(specs)


def check_tag_key(tag: str, cls: type) -> None:
    """Reject a tag key that is empty or shadows a field key of cls.

    Raises:
        InvalidKeyError: If the tag could not be told apart from the fields.
    """
    if not tag:
        msg = "key must not be empty"
        raise InvalidKeyError(msg)
    if any(spec.key == tag for spec in struct_fields(cls)):
        msg = f"tag key {tag!r} collides with a field key of {cls.__name__}"
        raise InvalidKeyError(msg)
