"""Antennas Bounded Context - Antenna Registry (Aggregate).

The registry owns every antenna of one map. It is immutable: insert and
remove return a new registry and leave the original untouched, so a caller
holding an older reference can never observe a half-applied mutation.

NO I/O operations - persisting a registry is done by infrastructure adapters
through the AntennaMapRepository port.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.antennas.errors import (
    DuplicatePositionError,
    InvalidSymbolError,
    PositionOutOfBoundsError,
)
from domain.antennas.value_objects import (
    CELL_DTYPE,
    EMPTY_CELL,
    Antenna,
    MapGrid,
    Position,
    is_frequency_symbol,
)


class AntennaRegistry(BaseModel):
    """Collection of antennas on a rows x columns map.

    Invariants:
        R-1: No two antennas share a position
        R-2: Every antenna lies within [0, rows) x [0, columns)

    Enumeration order is the order antennas were added; it carries no
    meaning beyond being stable for a given registry.
    """

    rows: int = Field(ge=0)
    columns: int = Field(ge=0)
    antennas: tuple[Antenna, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_registry(self) -> "AntennaRegistry":
        seen: set[tuple[int, int]] = set()
        for antenna in self.antennas:
            # R-2: bounds
            if antenna.x >= self.rows or antenna.y >= self.columns:
                raise PositionOutOfBoundsError(
                    antenna.x, antenna.y, self.rows, self.columns
                )
            # R-1: unique positions
            key = antenna.position.as_tuple()
            if key in seen:
                raise DuplicatePositionError(antenna.position)
            seen.add(key)
        return self

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------
    @classmethod
    def from_grid(cls, grid: MapGrid) -> "AntennaRegistry":
        """Scan the grid row by row and register every non-empty cell.

        Each cell is visited once, so no duplicate check is needed.

        Raises:
            InvalidSymbolError: If a cell holds a non-printable character
        """
        antennas: list[Antenna] = []
        for row in range(grid.rows):
            for column in range(grid.columns):
                position = Position(row=row, column=column)
                symbol = grid.cell(position)
                if symbol == EMPTY_CELL:
                    continue
                if not is_frequency_symbol(symbol):
                    raise InvalidSymbolError(row + 1, column, symbol)
                antennas.append(Antenna(frequency=symbol, position=position))
        return cls(rows=grid.rows, columns=grid.columns, antennas=tuple(antennas))

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.antennas)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Antenna):
            return item in self.antennas
        if isinstance(item, Position):
            return self.find(item.row, item.column) is not None
        return False

    @property
    def is_empty(self) -> bool:
        return not self.antennas

    def iter_antennas(self) -> Iterator[Antenna]:
        """Enumerate every antenna (read-only, restartable)."""
        return iter(self.antennas)

    def find(self, x: int, y: int) -> Antenna | None:
        """Return the antenna at (x, y), or None (linear scan)."""
        for antenna in self.antennas:
            if antenna.x == x and antenna.y == y:
                return antenna
        return None

    def contains_position(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies on the map grid."""
        return 0 <= x < self.rows and 0 <= y < self.columns

    # -----------------------------------------------------------------------
    # Mutations (return new registries)
    # -----------------------------------------------------------------------
    def insert(self, frequency: str, x: int, y: int) -> "AntennaRegistry":
        """Return a new registry with an antenna added at (x, y).

        Raises:
            DuplicatePositionError: If (x, y) is already occupied. This
                registry is left unchanged.
            PositionOutOfBoundsError: If (x, y) is outside the grid
            ValueError: If frequency is not a valid symbol
        """
        if not self.contains_position(x, y):
            raise PositionOutOfBoundsError(x, y, self.rows, self.columns)

        position = Position(row=x, column=y)
        if self.find(x, y) is not None:
            raise DuplicatePositionError(position)

        antenna = Antenna(frequency=frequency, position=position)
        return self.model_copy(update={"antennas": (*self.antennas, antenna)})

    def remove_with_status(
        self, x: int, y: int
    ) -> tuple["AntennaRegistry", Antenna | None]:
        """Remove the antenna at (x, y), reporting what was removed.

        Returns:
            Tuple of (registry, removed antenna). When nothing is at (x, y),
            the registry is this one and the antenna is None.
        """
        target = self.find(x, y)
        if target is None:
            return (self, None)
        remaining = tuple(a for a in self.antennas if a is not target)
        return (self.model_copy(update={"antennas": remaining}), target)

    def remove(self, x: int, y: int) -> "AntennaRegistry":
        """Return a registry without the antenna at (x, y).

        Removing an empty position returns a registry equal to this one.
        """
        registry, _ = self.remove_with_status(x, y)
        return registry

    # -----------------------------------------------------------------------
    # Grid reconstruction
    # -----------------------------------------------------------------------
    def to_grid(self) -> MapGrid:
        """Rebuild the full map: empty cells everywhere, then each antenna."""
        data = np.full((self.rows, self.columns), EMPTY_CELL, dtype=CELL_DTYPE)
        for antenna in self.antennas:
            data[antenna.x, antenna.y] = antenna.frequency
        return MapGrid(data=data)
