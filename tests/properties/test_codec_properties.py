"""Property-based tests for document encoding and decoding."""

from typing import TYPE_CHECKING

from hypothesis import given

from typedprops import dumps, loads
from typedprops._decoder import flatten_pairs, from_mapping
from typedprops._encoder import to_pairs
from typedprops._reader import parse_pairs
from typedprops._writer import PropertiesWriter

from tests.models import Data

from .strategies import data_strategy, int_map_strategy, pairs_strategy

if TYPE_CHECKING:
    from typedprops._types import PairSequence


class TestStructRoundtrip:
    """Encoding then decoding a struct yields an equal struct."""

    @given(data_strategy)
    def test_pairs_roundtrip(self, data: Data) -> None:
        assert from_mapping(flatten_pairs(to_pairs(data)), Data) == data

    @given(data_strategy)
    def test_text_roundtrip(self, data: Data) -> None:
        assert loads(dumps(data), Data) == data

    @given(data_strategy)
    def test_fields_in_declaration_order(self, data: Data) -> None:
        assert [key for key, _ in to_pairs(data)] == ["field_a", "field_b", "field_c"]


class TestMapRoundtrip:
    """Encoding then decoding a map yields an equal map."""

    @given(int_map_strategy)
    def test_text_roundtrip(self, value: dict[str, int]) -> None:
        assert loads(dumps(value), dict[str, int]) == value

    @given(int_map_strategy)
    def test_sorted_output(self, value: dict[str, int]) -> None:
        keys = [key for key, _ in to_pairs(value, sort_keys=True)]
        assert keys == sorted(value)


class TestPairBoundary:
    """The writer and parser agree on every pair sequence."""

    @given(pairs_strategy)
    def test_written_pairs_parse_back(self, pairs: "PairSequence") -> None:
        writer = PropertiesWriter()
        writer.write_pairs(pairs)
        assert parse_pairs(writer.getvalue()) == pairs

    @given(pairs_strategy)
    def test_flatten_keeps_last_value(self, pairs: "PairSequence") -> None:
        mapping = flatten_pairs(pairs)
        for key, value in reversed(pairs):
            if key in mapping:
                assert mapping[key] == value
                break
        assert set(mapping) == {key for key, _ in pairs}
