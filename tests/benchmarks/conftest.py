"""Benchmark collection hooks and shared documents."""

from pathlib import Path

import pytest

from typedprops import dumps

BENCHMARK_DIR = Path(__file__).parent

# Values exercising every escape the writer produces
ESCAPE_SAMPLES: tuple[str, ...] = (
    "plain",
    "  leading blanks",
    "a=b:c#d!e",
    "C:\\path\\to\\file",
    "line one\nline two",
    "caf\u00e9 \u00fcber \u2603",
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if item.path.is_relative_to(BENCHMARK_DIR):
            item.add_marker(pytest.mark.benchmark)


@pytest.fixture
def escaped_map() -> dict[str, str]:
    return {
        f"entry.{i:04d}": ESCAPE_SAMPLES[i % len(ESCAPE_SAMPLES)] for i in range(500)
    }


@pytest.fixture
def escaped_bytes(escaped_map: dict[str, str]) -> bytes:
    return dumps(escaped_map, ensure_ascii=True).encode("iso-8859-1")
