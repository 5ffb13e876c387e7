"""Antenna map application service.

Ties the domain registry to a persisted map file:
load -> build registry -> mutate (each mutation rewrites the file) -> hazards.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from domain.antennas.errors import (
    AntennaMapError,
    DuplicatePositionError,
    EmptyRegistryError,
)
from domain.antennas.registry import AntennaRegistry
from domain.antennas.repositories import AntennaMapRepository
from domain.antennas.services import detect_hazards
from domain.antennas.value_objects import Antenna, HazardReport, MapGrid

logger = logging.getLogger(__name__)


class MutationResult(BaseModel):
    """Outcome of an insert or remove.

    Attributes:
        registry: Registry to use from now on (the previous one when
            nothing changed)
        changed: True if an antenna was added or removed
        antenna: The antenna added or removed, if any
        error: Non-fatal rejection reason (duplicate position)
    """

    registry: AntennaRegistry
    changed: bool
    antenna: Antenna | None = None
    error: AntennaMapError | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class AntennaMapService:
    """Owns the registry of one map file and keeps the file in sync.

    Not thread-safe; one service per map file and process.
    """

    def __init__(self, repository: AntennaMapRepository, file_path: Path | str) -> None:
        self.repository = repository
        self.file_path = Path(file_path)
        self._grid: MapGrid | None = None
        self._registry: AntennaRegistry | None = None

    @property
    def grid(self) -> MapGrid:
        """Grid as loaded from storage (not updated by mutations)."""
        if self._grid is None:
            raise RuntimeError("Map not loaded; call load() first")
        return self._grid

    @property
    def registry(self) -> AntennaRegistry:
        if self._registry is None:
            raise RuntimeError("Map not loaded; call load() first")
        return self._registry

    def load(self) -> AntennaRegistry:
        """Load the map file and build the registry.

        On failure the service keeps whatever it held before.

        Raises:
            SourceUnavailableError, MapFormatError, AllocationError
        """
        grid = self.repository.load_grid(self.file_path)
        registry = AntennaRegistry.from_grid(grid)
        self._grid, self._registry = grid, registry
        if registry.is_empty:
            logger.warning("Map %s: no antennas found", self.file_path.name)
        else:
            logger.info(
                "Map %s: %d antennas on %dx%d grid",
                self.file_path.name,
                len(registry),
                registry.rows,
                registry.columns,
            )
        return registry

    def require_antennas(self) -> AntennaRegistry:
        """Return the registry, raising EmptyRegistryError if it is empty."""
        registry = self.registry
        if registry.is_empty:
            raise EmptyRegistryError(f"No antennas in {self.file_path.name}")
        return registry

    def insert(self, frequency: str, x: int, y: int) -> MutationResult:
        """Add an antenna and rewrite the map file.

        A duplicate position is rejected without touching the file; the
        result then carries the unchanged registry and the error.

        Raises:
            PositionOutOfBoundsError: If (x, y) is outside the grid
            SourceUnavailableError: If the file cannot be rewritten
        """
        current = self.registry
        try:
            updated = current.insert(frequency, x, y)
        except DuplicatePositionError as e:
            logger.warning("Insert rejected: %s", e)
            return MutationResult(registry=current, changed=False, error=e)

        self.repository.save_grid(updated.to_grid(), self.file_path)
        self._registry = updated
        antenna = updated.find(x, y)
        logger.info("Inserted antenna %s at (%d, %d)", frequency, x, y)
        return MutationResult(registry=updated, changed=True, antenna=antenna)

    def remove(self, x: int, y: int) -> MutationResult:
        """Remove the antenna at (x, y) and rewrite the map file.

        The file is rewritten even when no antenna was at (x, y).
        """
        updated, removed = self.registry.remove_with_status(x, y)
        self.repository.save_grid(updated.to_grid(), self.file_path)
        self._registry = updated
        if removed is None:
            logger.info("No antenna at (%d, %d); map rewritten unchanged", x, y)
        else:
            logger.info("Removed antenna %s at (%d, %d)", removed.frequency, x, y)
        return MutationResult(
            registry=updated, changed=removed is not None, antenna=removed
        )

    def hazards(self) -> HazardReport:
        """Compute hazard cells for the current registry."""
        report = detect_hazards(self.registry)
        logger.debug("Map %s: %d hazard cells", self.file_path.name, len(report))
        return report
