"""Read properties text into flat pairs.

Line syntax (comments, continuation lines, escapes) is handled entirely by
the javaproperties library. Errors it raises, such as InvalidUEscapeError,
propagate unchanged.
"""

import logging
from typing import IO, TYPE_CHECKING

import javaproperties

from ._constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from ._types import PairSequence

__all__ = ["decode_bytes", "parse_pairs", "read_pairs"]

logger = logging.getLogger(__name__)


def decode_bytes(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode raw document bytes.

    Args:
        data: The encoded document.
        encoding: Character encoding of the document. ISO-8859-1 is the
            format's historical default; UTF-8 is common in practice.

    Returns:
        The document text.

    Raises:
        UnicodeDecodeError: If data is not valid in the given encoding.
    """
    return data.decode(encoding)


def parse_pairs(text: str) -> "PairSequence":
    """Scan a properties document into its (key, value) pairs.

    Args:
        text: The document text.

    Returns:
        Every key/value entry in document order, duplicates included.
        Comments and blank lines are dropped.
    """
    pairs: PairSequence = javaproperties.loads(text, object_pairs_hook=list)
    logger.debug("parsed %d pairs", len(pairs))
    return pairs


def read_pairs(fp: IO[str] | IO[bytes], encoding: str = DEFAULT_ENCODING) -> "PairSequence":
    """Read and scan a text or binary stream.

    Args:
        fp: An open file object. Binary content is decoded with encoding.
        encoding: Character encoding for binary streams.

    Returns:
        The pairs of the document, as for parse_pairs.
    """
    content = fp.read()
    if isinstance(content, bytes):
        content = decode_bytes(content, encoding)
    return parse_pairs(content)
