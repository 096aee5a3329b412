"""Property-based tests for the field codec."""

from hypothesis import given, strategies as st

from typedprops import Float32, Int64
from typedprops._field import decode_field, encode_field

from .strategies import field_value_strategy, finite_float_strategy, int64_strategy, value_strategy


class TestFieldRoundtrip:
    """decode(encode(x)) == x for every representable field value."""

    @given(field_value_strategy)
    def test_roundtrip(self, value: object) -> None:
        assert decode_field(encode_field(value), type(value)) == value

    @given(int64_strategy)
    def test_sized_int_roundtrip(self, value: int) -> None:
        assert decode_field(encode_field(value, Int64), Int64) == value

    @given(st.floats(width=32, allow_nan=False))
    def test_float32_roundtrip(self, value: float) -> None:
        assert decode_field(encode_field(value, Float32), Float32) == value

    @given(st.floats())
    def test_float_roundtrip_including_specials(self, value: float) -> None:
        decoded = decode_field(encode_field(value), float)
        assert decoded == value or (decoded != decoded and value != value)

    @given(value_strategy)
    def test_optional_string_roundtrip(self, value: str) -> None:
        decoded = decode_field(encode_field(value), str | None)
        assert decoded == (value or None)


class TestEncodingProperties:
    """Encoded text is canonical."""

    @given(finite_float_strategy)
    def test_float_encoding_is_repr(self, value: float) -> None:
        assert encode_field(value) == repr(value)

    @given(int64_strategy)
    def test_int_encoding_has_no_padding(self, value: int) -> None:
        encoded = encode_field(value)
        assert encoded == encoded.strip()
        assert not encoded.lstrip("-").startswith("0") or value == 0
