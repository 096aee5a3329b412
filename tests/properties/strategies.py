"""Hypothesis strategies for typedprops property-based testing."""

from hypothesis import strategies as st

from typedprops._constants import MAX_INT64, MIN_INT64

from tests.models import Data, Switch

# Keys: non-empty text; surrogates cannot be encoded by any writer
key_strategy = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=20
)

# Values: any text, including reserved characters and line breaks
value_strategy = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=40)

int64_strategy = st.integers(min_value=MIN_INT64, max_value=MAX_INT64)

finite_float_strategy = st.floats(allow_nan=False, allow_infinity=False)

field_value_strategy = st.one_of(
    st.booleans(),
    int64_strategy,
    finite_float_strategy,
    value_strategy,
    st.sampled_from(Switch),
)

# Raw pair sequences, duplicates allowed
pairs_strategy = st.lists(st.tuples(key_strategy, value_strategy), max_size=10)

# Data structs with boundary integers mixed in
data_strategy = st.builds(
    Data,
    field_a=value_strategy,
    field_b=st.one_of(st.sampled_from([0, MIN_INT64, MAX_INT64]), int64_strategy),
    field_c=st.booleans(),
)

int_map_strategy = st.dictionaries(key_strategy, int64_strategy, max_size=10)
