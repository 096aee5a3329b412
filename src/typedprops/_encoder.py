"""Root-level encoder: one document value to an ordered pair sequence."""

import dataclasses
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ._exceptions import InvalidKeyError, UnsupportedFieldTypeError, UnsupportedRootTypeError
from ._field import encode_field
from ._shapes import check_tag_key, describe_value, struct_fields

if TYPE_CHECKING:
    from ._types import PairSequence

__all__ = ["to_pairs"]

logger = logging.getLogger(__name__)


def to_pairs(
    value: object, *, tag: str | None = None, sort_keys: bool = False
) -> "PairSequence":
    """Encode a document value into ordered (key, value) pairs.

    Args:
        value: A dataclass instance, a mapping, or None. A dataclass that is
            one variant of a tagged union is encoded like any other dataclass.
        tag: When given, a ``(tag, ClassName)`` pair is emitted before the
            fields of a dataclass so the variant can be recovered on decode.
        sort_keys: Emit mapping entries sorted by encoded key instead of in
            iteration order. Dataclass fields always keep declaration order.

    Returns:
        The pairs in output order. None encodes to an empty list.

    Raises:
        UnsupportedRootTypeError: If value is not a legal document root or
            holds a nested struct, map or sequence.
        UnsupportedFieldTypeError: If a field value has no string form.
        InvalidKeyError: If a key is empty, or the tag key is also a field key.
        ConversionError: If a field value does not fit its declared type.
    """
    if value is None:
        return []
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        pairs = _struct_pairs(value, tag)
    elif isinstance(value, Mapping):
        pairs = _map_pairs(value, sort_keys)
    else:
        msg = (
            f"cannot encode {describe_value(value)} as a document; "
            "expected a dataclass or a mapping"
        )
        raise UnsupportedRootTypeError(msg)
    logger.debug("encoded %s into %d pairs", describe_value(value), len(pairs))
    return pairs


def _struct_pairs(value: object, tag: str | None) -> "PairSequence":
    pairs: PairSequence = []
    if tag is not None:
        check_tag_key(tag, type(value))
        pairs.append((tag, type(value).__name__))
    for spec in struct_fields(type(value)):
        field_value = getattr(value, spec.name)
        if field_value is None:
            continue
        _check_key(spec.key)
        try:
            encoded = encode_field(field_value, spec.hint)
        except UnsupportedFieldTypeError as e:
            msg = f"field {spec.key!r}: {e}"
            raise UnsupportedFieldTypeError(msg) from e
        pairs.append((spec.key, encoded))
    return pairs


def _map_pairs(value: Mapping[object, object], sort_keys: bool) -> "PairSequence":
    pairs: PairSequence = []
    for key, item in value.items():
        if item is None:
            continue
        encoded_key = encode_field(key)
        _check_key(encoded_key)
        pairs.append((encoded_key, encode_field(item)))
    if sort_keys:
        pairs.sort(key=lambda pair: pair[0])
    return pairs


def _check_key(key: str) -> None:
    if not key:
        msg = "key must not be empty"
        raise InvalidKeyError(msg)
