"""Root-level decoder: a flattened key/value mapping to a typed value."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ._exceptions import (
    ConversionError,
    FieldTypeError,
    InvalidKeyError,
    MissingFieldError,
    UnknownVariantError,
    UnsupportedRootTypeError,
)
from ._field import decode_field
from ._shapes import (
    check_tag_key,
    describe_type,
    is_field_type,
    is_root_type,
    map_types,
    struct_fields,
    union_variants,
    unwrap_optional,
)

if TYPE_CHECKING:
    from ._types import FlatMapping, Pair

__all__ = ["flatten_pairs", "from_mapping"]

logger = logging.getLogger(__name__)


def flatten_pairs(pairs: "Iterable[Pair]") -> "FlatMapping":
    """Fold a pair sequence into a mapping where the last duplicate wins.

    Args:
        pairs: The (key, value) pairs in document order.

    Returns:
        A dict from key to value. Each key keeps the position of its first
        occurrence and the value of its last.

    Raises:
        InvalidKeyError: If a key is empty.
    """
    mapping: FlatMapping = {}
    for key, value in pairs:
        if not key:
            msg = "key must not be empty"
            raise InvalidKeyError(msg)
        mapping[key] = value
    return mapping


def from_mapping(
    mapping: Mapping[str, str], target: Any, *, tag: str | None = None
) -> Any:
    """Decode a flattened mapping into a value of the target type.

    Args:
        mapping: Key to raw value strings.
        target: A dataclass, a mapping type such as ``dict[str, int]``, a
            union of dataclasses, or an Optional of one of these.
        tag: The key naming the active variant when target is a union of
            dataclasses. Ignored for other targets.

    Returns:
        The decoded value, or None for an Optional target with no relevant
        keys in the mapping.

    Raises:
        UnsupportedRootTypeError: If target is not a legal document type.
        MissingFieldError: If a required field's key is absent.
        FieldTypeError: If a present value fails to convert.
        UnknownVariantError: If the tag names no variant of the union.
        InvalidKeyError: If the tag key is also a field key of a variant.
    """
    inner, optional = unwrap_optional(target)
    if not is_root_type(inner):
        kind = "field" if is_field_type(inner) else "unsupported"
        msg = (
            f"cannot decode a document into {kind} type {describe_type(target)}; "
            "expected a dataclass, a mapping or a union of dataclasses"
        )
        raise UnsupportedRootTypeError(msg)
    if optional and not _has_relevant_keys(mapping, inner, tag):
        return None
    if isinstance(inner, type) and dataclasses.is_dataclass(inner):
        return _decode_struct(mapping, inner)
    kv = map_types(inner)
    if kv is not None:
        return _decode_map(mapping, kv[0], kv[1])
    variants = union_variants(inner)
    if variants is None:
        msg = f"no decoder for root type {describe_type(target)}"
        raise UnsupportedRootTypeError(msg)
    return _decode_variant(mapping, variants, tag)


def _has_relevant_keys(mapping: Mapping[str, str], inner: object, tag: str | None) -> bool:
    if isinstance(inner, type) and dataclasses.is_dataclass(inner):
        return any(spec.key in mapping for spec in struct_fields(inner))
    if map_types(inner) is not None:
        return len(mapping) > 0
    variants = union_variants(inner)
    if variants is not None:
        if tag is not None and tag in mapping:
            return True
        return any(_has_relevant_keys(mapping, variant, None) for variant in variants)
    return False


def _decode_struct(mapping: Mapping[str, str], cls: type) -> object:
    specs = struct_fields(cls)
    kwargs: dict[str, object] = {}
    for spec in specs:
        raw = mapping.get(spec.key)
        if raw is None:
            if spec.has_default:
                continue
            if spec.optional:
                kwargs[spec.name] = None
                continue
            raise MissingFieldError(spec.key)
        if spec.optional and raw == "":
            kwargs[spec.name] = None
            continue
        kwargs[spec.name] = _convert(spec.key, raw, spec.hint)
    if logger.isEnabledFor(logging.DEBUG):
        ignored = len(mapping.keys() - {spec.key for spec in specs})
        logger.debug("decoded %s, ignored %d undeclared keys", cls.__name__, ignored)
    return cls(**kwargs)


def _decode_map(
    mapping: Mapping[str, str], key_hint: object, value_hint: object
) -> dict[object, object]:
    for hint in (key_hint, value_hint):
        if not is_field_type(hint):
            msg = (
                f"cannot decode mapping entries of type {describe_type(hint)}; "
                "nested structures are not supported"
            )
            raise UnsupportedRootTypeError(msg)
    result: dict[object, object] = {}
    for key, raw in mapping.items():
        result[_convert(key, key, key_hint)] = _convert(key, raw, value_hint)
    return result


def _decode_variant(
    mapping: Mapping[str, str], variants: tuple[type, ...], tag: str | None
) -> object:
    names = " | ".join(variant.__name__ for variant in variants)
    if tag is None:
        msg = (
            f"cannot select a variant of {names} without a tag key; "
            "pass tag= or decode into the variant class directly"
        )
        raise UnsupportedRootTypeError(msg)
    for variant in variants:
        check_tag_key(tag, variant)
    name = mapping.get(tag)
    if name is None:
        raise MissingFieldError(tag)
    for variant in variants:
        if variant.__name__ == name:
            logger.debug("selected variant %s via tag key %r", name, tag)
            return _decode_struct(mapping, variant)
    raise UnknownVariantError(name, names)


def _convert(name: str, raw: str, hint: object) -> object:
    try:
        return decode_field(raw, hint)
    except ConversionError as e:
        raise FieldTypeError(name, raw, describe_type(unwrap_optional(hint)[0])) from e
