import io

import pytest
from javaproperties import InvalidUEscapeError

from typedprops._reader import decode_bytes, parse_pairs, read_pairs


class TestParsePairs:
    def test_empty_text(self) -> None:
        assert parse_pairs("") == []

    def test_separators(self) -> None:
        text = "a=1\nb: 2\nc 3\n"
        assert parse_pairs(text) == [("a", "1"), ("b", "2"), ("c", "3")]

    def test_comments_and_blank_lines_dropped(self) -> None:
        text = "# comment\n! also comment\n\nkey=value\n"
        assert parse_pairs(text) == [("key", "value")]

    def test_duplicates_kept_in_order(self) -> None:
        assert parse_pairs("k=1\nk=2\n") == [("k", "1"), ("k", "2")]

    def test_line_continuation(self) -> None:
        text = "fruits=apple, \\\n    banana\n"
        assert parse_pairs(text) == [("fruits", "apple, banana")]

    def test_escapes(self) -> None:
        text = "key\\ with\\ spaces=a\\=b\\u00e9\n"
        assert parse_pairs(text) == [("key with spaces", "a=b\u00e9")]

    def test_missing_trailing_newline(self) -> None:
        assert parse_pairs("key=value") == [("key", "value")]

    def test_crlf_line_endings(self) -> None:
        assert parse_pairs("a=1\r\nb=2\r\n") == [("a", "1"), ("b", "2")]

    def test_invalid_u_escape_propagates(self) -> None:
        with pytest.raises(InvalidUEscapeError):
            _ = parse_pairs("key=\\u12\n")


class TestDecodeBytes:
    def test_default_is_latin1(self) -> None:
        assert decode_bytes(b"name=caf\xe9\n") == "name=caf\u00e9\n"

    def test_utf8(self) -> None:
        assert decode_bytes("name=café\n".encode(), "utf-8") == "name=café\n"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(UnicodeDecodeError):
            _ = decode_bytes(b"\xff", "utf-8")


class TestReadPairs:
    def test_text_stream(self) -> None:
        assert read_pairs(io.StringIO("a=1\n")) == [("a", "1")]

    def test_binary_stream(self) -> None:
        assert read_pairs(io.BytesIO(b"a=\xe9\n")) == [("a", "\u00e9")]

    def test_binary_stream_with_encoding(self) -> None:
        stream = io.BytesIO("a=é\n".encode())
        assert read_pairs(stream, "utf-8") == [("a", "é")]
