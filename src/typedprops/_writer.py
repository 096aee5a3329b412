"""Render flat pairs as properties text."""

from collections.abc import Iterable
from enum import Enum
from typing import TYPE_CHECKING

import javaproperties

from ._constants import DEFAULT_SEPARATOR, SEPARATOR_BLANKS
from ._exceptions import InvalidSeparatorError

if TYPE_CHECKING:
    from ._types import Pair

__all__ = ["LineEnding", "PropertiesWriter", "validate_separator"]


class LineEnding(Enum):
    """Line terminator written after every pair."""

    LF = "\n"
    CR = "\r"
    CRLF = "\r\n"


def validate_separator(separator: str) -> None:
    """Check that separator is legal between a key and a value.

    A separator is legal when it is non-empty and consists only of blanks
    (space, tab, form feed), except for at most one ``=`` or ``:``.

    Raises:
        InvalidSeparatorError: If the separator is not legal.
    """
    core = "".join(ch for ch in separator if ch not in SEPARATOR_BLANKS)
    if not separator or core not in ("", "=", ":"):
        msg = f"invalid key/value separator: {separator!r}"
        raise InvalidSeparatorError(msg)


class PropertiesWriter:
    """Accumulates pairs as properties lines.

    Escaping of reserved characters is delegated to javaproperties, which
    follows java.util.Properties.store().

    Args:
        separator: Text between each key and value.
        line_ending: Terminator written after each line.
        ensure_ascii: Escape non-ASCII characters as ``\\uXXXX``.

    Raises:
        InvalidSeparatorError: If separator is not legal.
    """

    __slots__ = ("_ensure_ascii", "_line_ending", "_lines", "_separator")

    def __init__(
        self,
        separator: str = DEFAULT_SEPARATOR,
        line_ending: LineEnding = LineEnding.LF,
        *,
        ensure_ascii: bool = True,
    ) -> None:
        validate_separator(separator)
        self._separator: str = separator
        self._line_ending: LineEnding = line_ending
        self._ensure_ascii: bool = ensure_ascii
        self._lines: list[str] = []

    @property
    def separator(self) -> str:
        return self._separator

    def set_separator(self, separator: str) -> None:
        """Replace the key/value separator for subsequent lines."""
        validate_separator(separator)
        self._separator = separator

    @property
    def line_ending(self) -> LineEnding:
        return self._line_ending

    def set_line_ending(self, line_ending: LineEnding) -> None:
        self._line_ending = line_ending

    def write(self, key: str, value: str) -> None:
        """Append one escaped ``key<separator>value`` line."""
        line = javaproperties.join_key_value(
            key, value, separator=self._separator, ensure_ascii=self._ensure_ascii
        )
        self._lines.append(line + self._line_ending.value)

    def write_pairs(self, pairs: "Iterable[Pair]") -> None:
        for key, value in pairs:
            self.write(key, value)

    def getvalue(self) -> str:
        """Return the document written so far."""
        return "".join(self._lines)
