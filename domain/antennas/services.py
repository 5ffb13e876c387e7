"""Antennas Bounded Context - Domain Services.

Pure domain logic for hazard analysis.
NO I/O operations - map files are read and written by infrastructure
adapters under `src/infrastructure/antennas/text_map_adapter.py` via the
AntennaMapRepository port.
"""

from __future__ import annotations

import numpy as np

from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import HazardPosition, HazardReport


# ---------------------------------------------------------------------------
# Main Service: detect_hazards
# ---------------------------------------------------------------------------
def detect_hazards(registry: AntennaRegistry) -> HazardReport:
    """Find every grid cell orthogonally adjacent to an antenna.

    For each antenna, the four neighbours (up, down, left, right) are
    checked against the grid bounds and a visited matrix sized to the
    registry's rows x columns. Each cell is reported at most once.

    A neighbour that hosts another antenna is still reported. Changing
    the antenna order changes only the order of the result, not its set
    of cells.

    Args:
        registry: Current antenna registry

    Returns:
        HazardReport with positions in discovery order

    Example:
        >>> grid = MapGrid.from_lines(["..A", "...", "B.."])
        >>> report = detect_hazards(AntennaRegistry.from_grid(grid))
        >>> sorted(report.coordinates())
        [(0, 1), (1, 0), (1, 2), (2, 1)]
    """
    rows, columns = registry.rows, registry.columns
    visited = np.zeros((rows, columns), dtype=bool)
    hazards: list[HazardPosition] = []

    for antenna in registry.iter_antennas():
        for row, column in antenna.position.neighbours():
            if not (0 <= row < rows and 0 <= column < columns):
                continue
            if visited[row, column]:
                continue
            visited[row, column] = True
            hazards.append(HazardPosition(row=row, column=column))

    return HazardReport(rows=rows, columns=columns, positions=tuple(hazards))
