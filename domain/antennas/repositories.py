"""Domain Port(s) for Antenna Map I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .value_objects import MapGrid


class AntennaMapRepository(Protocol):
    """Port for reading and rewriting persisted antenna maps.

    Implementations live in infrastructure (e.g., text map adapter).
    """

    def load_grid(self, file_path: Path | str) -> MapGrid:
        """Load a map and return its rectangular MapGrid."""
        ...

    def save_grid(self, grid: MapGrid, file_path: Path | str) -> None:
        """Overwrite the map at file_path with the rows of grid."""
        ...
