"""Shared fixtures for unit tests."""

import pytest

from tests.models import Data


@pytest.fixture
def data() -> Data:
    """Provide the struct used by the end-to-end examples.

    Returns:
        A Data instance whose encoding is
        ``field_a=a value``, ``field_b=100``, ``field_c=true``.
    """
    return Data(field_a="a value", field_b=100, field_c=True)


@pytest.fixture
def data_text() -> str:
    """Provide the properties text matching the data fixture."""
    return "field_a=a value\nfield_b=100\nfield_c=true\n"
