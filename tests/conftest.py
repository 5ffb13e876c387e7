"""Root pytest configuration for all tests.

Fixtures here give each test its own writable copy of a map, since every
registry mutation rewrites the map file.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import MapGrid
from tests.conftest_utils import copy_fixture, write_map

# Grid used throughout the hazard scenarios: A at (0, 2), B at (2, 0)
CORNERS_ROWS = ("..A", "...", "B..")


@pytest.fixture
def corners_grid() -> MapGrid:
    return MapGrid.from_lines(CORNERS_ROWS)


@pytest.fixture
def corners_registry(corners_grid: MapGrid) -> AntennaRegistry:
    return AntennaRegistry.from_grid(corners_grid)


@pytest.fixture
def map_file(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Factory writing rows to a map file under tmp_path."""

    def _write(rows: Iterable[str], name: str = "map.txt") -> Path:
        return write_map(tmp_path, rows, name)

    return _write


@pytest.fixture
def fixture_copy(tmp_path: Path) -> Callable[[str], Path]:
    """Factory copying a tests/fixtures map into tmp_path."""

    def _copy(name: str) -> Path:
        return copy_fixture(name, tmp_path)

    return _copy
