"""Sanity tests for antenna map test fixtures.

These tests validate that each fixture exists and that the loadable ones
have the expected shape. They are NOT behavioral tests - loader behavior is
covered in tests/infrastructure/test_text_map_adapter.py.

Regenerate with: python scripts/gen_fixtures.py
"""

from pathlib import Path

import pytest

from shared.fixtures_expected import EXPECTED_FIXTURE_COUNT, EXPECTED_FIXTURES
from tests.conftest_utils import get_fixtures_dir

FIXTURES_DIR = get_fixtures_dir()


def fixture_path(name: str) -> Path:
    """Get path to a fixture file."""
    return FIXTURES_DIR / name


def test_expected_fixture_count():
    assert EXPECTED_FIXTURE_COUNT == len(EXPECTED_FIXTURES)
    assert EXPECTED_FIXTURES == sorted(EXPECTED_FIXTURES)


@pytest.mark.parametrize("name", EXPECTED_FIXTURES)
def test_fixture_exists(name):
    assert fixture_path(name).is_file(), f"Missing fixture {name}"


def test_no_unexpected_fixtures():
    found = sorted(p.name for p in FIXTURES_DIR.iterdir() if p.suffix == ".txt")
    assert found == EXPECTED_FIXTURES


@pytest.mark.parametrize(
    "name, shape",
    [
        ("corners_3x3.txt", (3, 3)),
        ("crlf_endings.txt", (2, 3)),
        ("no_antennas.txt", (2, 4)),
        ("sample_map.txt", (12, 12)),
        ("trailing_blank_lines.txt", (2, 3)),
    ],
)
def test_fixture_shapes(name, shape):
    from infrastructure.antennas.text_map_adapter import TextMapAdapter

    assert TextMapAdapter().load_grid(fixture_path(name)).shape == shape
