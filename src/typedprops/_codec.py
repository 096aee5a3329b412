"""Public load and dump entry points.

Each function wires the text layer (_reader, _writer) to the typed layer
(_decoder, _encoder) through a flat pair sequence. No state survives a call.
"""

import codecs
import io
from typing import IO, Any, TypeVar, overload

from ._constants import DEFAULT_ENCODING, DEFAULT_SEPARATOR
from ._decoder import flatten_pairs, from_mapping
from ._encoder import to_pairs
from ._reader import decode_bytes, parse_pairs, read_pairs
from ._writer import LineEnding, PropertiesWriter

__all__ = ["dump", "dumpb", "dumps", "load", "loadb", "loads"]

T = TypeVar("T")


@overload
def loads(text: str, target: type[T], *, tag: str | None = None) -> T: ...  # pragma: no cover


@overload
def loads(text: str, target: Any, *, tag: str | None = None) -> Any: ...  # pragma: no cover


def loads(text: str, target: Any, *, tag: str | None = None) -> Any:
    """Decode a properties document held in a string.

    Args:
        text: The document text.
        target: The type to decode into, for example a dataclass,
            ``dict[str, int]``, ``A | B`` or ``Config | None``.
        tag: Key naming the active variant when target is a union of
            dataclasses.

    Returns:
        The decoded value.

    Raises:
        PropertiesError: If the document does not fit target.
        InvalidUEscapeError: If the text holds a malformed ``\\uXXXX`` escape.
    """
    return from_mapping(flatten_pairs(parse_pairs(text)), target, tag=tag)


def loadb(
    data: bytes,
    target: Any,
    *,
    encoding: str = DEFAULT_ENCODING,
    tag: str | None = None,
) -> Any:
    """Decode a properties document held in bytes, as for loads."""
    return loads(decode_bytes(data, encoding), target, tag=tag)


def load(
    fp: IO[str] | IO[bytes],
    target: Any,
    *,
    encoding: str = DEFAULT_ENCODING,
    tag: str | None = None,
) -> Any:
    """Decode a properties document from a text or binary stream."""
    return from_mapping(flatten_pairs(read_pairs(fp, encoding)), target, tag=tag)


def dumps(
    value: object,
    *,
    separator: str = DEFAULT_SEPARATOR,
    line_ending: LineEnding = LineEnding.LF,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
    tag: str | None = None,
) -> str:
    """Encode a value as a properties document string.

    Args:
        value: A dataclass instance, a mapping, or None.
        separator: Text between each key and value.
        line_ending: Terminator after each line.
        sort_keys: Sort mapping entries by key.
        ensure_ascii: Escape non-ASCII characters as ``\\uXXXX``.
        tag: Key under which the dataclass name is written first.

    Returns:
        One line per present field or entry.

    Raises:
        PropertiesError: If value cannot be expressed as a document.
    """
    writer = PropertiesWriter(separator, line_ending, ensure_ascii=ensure_ascii)
    writer.write_pairs(to_pairs(value, tag=tag, sort_keys=sort_keys))
    return writer.getvalue()


def dumpb(
    value: object,
    *,
    encoding: str = DEFAULT_ENCODING,
    separator: str = DEFAULT_SEPARATOR,
    line_ending: LineEnding = LineEnding.LF,
    sort_keys: bool = False,
    ensure_ascii: bool | None = None,
    tag: str | None = None,
) -> bytes:
    """Encode a value as a properties document in the given encoding.

    ensure_ascii defaults to true for every encoding except UTF-8, so that
    characters the encoding cannot represent are written as escapes.
    """
    if ensure_ascii is None:
        ensure_ascii = codecs.lookup(encoding).name != "utf-8"
    text = dumps(
        value,
        separator=separator,
        line_ending=line_ending,
        sort_keys=sort_keys,
        ensure_ascii=ensure_ascii,
        tag=tag,
    )
    return text.encode(encoding)


def dump(
    value: object,
    fp: IO[str] | IO[bytes],
    *,
    encoding: str = DEFAULT_ENCODING,
    separator: str = DEFAULT_SEPARATOR,
    line_ending: LineEnding = LineEnding.LF,
    sort_keys: bool = False,
    ensure_ascii: bool | None = None,
    tag: str | None = None,
) -> None:
    """Encode a value and write it to a text or binary stream.

    Binary streams receive the document as for dumpb, in the given encoding.
    Text streams receive it as for dumps, and encoding is not used.

    The document is fully rendered before anything is written, so a failed
    encode leaves fp untouched.
    """
    if isinstance(fp, (io.RawIOBase, io.BufferedIOBase)):
        data = dumpb(
            value,
            encoding=encoding,
            separator=separator,
            line_ending=line_ending,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
            tag=tag,
        )
        _ = fp.write(data)
        return
    text = dumps(
        value,
        separator=separator,
        line_ending=line_ending,
        sort_keys=sort_keys,
        ensure_ascii=bool(ensure_ascii),
        tag=tag,
    )
    _ = fp.write(text)
