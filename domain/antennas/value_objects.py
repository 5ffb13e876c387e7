"""Antennas Bounded Context - Value Objects.

Immutable data structures describing the antenna map.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.antennas.errors import RaggedRowError

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
EMPTY_CELL = "."  # Sentinel for a cell without an antenna

# Orthogonal neighbour offsets: up, down, left, right
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# numpy dtype for one-character cells
CELL_DTYPE = "<U1"


def is_frequency_symbol(symbol: str) -> bool:
    """Return True if symbol can name an antenna frequency."""
    return len(symbol) == 1 and symbol != EMPTY_CELL and symbol.isprintable()


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------
class Position(BaseModel):
    """Grid coordinate (Value Object).

    ``row`` is the line index in the map file and ``column`` the character
    index within that line. Both are zero-based.

    Invariants:
        P-1: row >= 0
        P-2: column >= 0
    """

    row: int = Field(ge=0)
    column: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)

    def neighbours(self) -> Iterator[tuple[int, int]]:
        """Yield orthogonal neighbour coordinates (up, down, left, right).

        Coordinates may be negative; callers are responsible for bounds checks.
        """
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            yield (self.row + d_row, self.column + d_col)


class HazardPosition(Position):
    """Grid cell orthogonally adjacent to at least one antenna."""


# ---------------------------------------------------------------------------
# Antenna
# ---------------------------------------------------------------------------
class Antenna(BaseModel):
    """Antenna placed on the map (Value Object).

    Invariants:
        A-1: frequency is one printable character
        A-2: frequency is never the empty cell sentinel
    """

    frequency: str
    position: Position

    model_config = ConfigDict(frozen=True)

    @field_validator("frequency")
    @classmethod
    def validate_frequency(cls, value: str) -> str:
        if not is_frequency_symbol(value):
            raise ValueError(f"Invalid antenna frequency symbol: {value!r}")
        return value

    @property
    def x(self) -> int:
        return self.position.row

    @property
    def y(self) -> int:
        return self.position.column


# ---------------------------------------------------------------------------
# MapGrid
# ---------------------------------------------------------------------------
class MapGrid(BaseModel):
    """Rectangular character matrix of the antenna map (Value Object).

    The data array is made read-only at construction time. Attempts to
    modify it after construction raise ValueError.
    """

    data: NDArray[np.str_]  # 2D '<U1' array (rows x columns), read-only

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_grid(self) -> "MapGrid":
        if self.data.ndim != 2:
            raise ValueError(f"Data must be 2D, got {self.data.ndim}D")
        if self.data.dtype.kind != "U" or self.data.dtype.itemsize > 4:
            raise ValueError(f"Data must hold single characters, got {self.data.dtype}")

        # Owned, contiguous copy so the grid never aliases a caller's array
        immutable = np.array(self.data, dtype=CELL_DTYPE, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "data", immutable)

        return self

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> "MapGrid":
        """Build a grid from row strings.

        The first line fixes the column count. Any other line with a
        different length raises RaggedRowError; no partial grid is built.
        """
        if not lines:
            return cls(data=np.empty((0, 0), dtype=CELL_DTYPE))

        columns = len(lines[0])
        for index, line in enumerate(lines[1:], start=2):
            if len(line) != columns:
                raise RaggedRowError(index, columns, len(line))

        data = np.array([list(line) for line in lines], dtype=CELL_DTYPE)
        return cls(data=data.reshape(len(lines), columns))

    @classmethod
    def empty(cls, rows: int, columns: int) -> "MapGrid":
        """Return a rows x columns grid filled with the empty cell sentinel."""
        return cls(data=np.full((rows, columns), EMPTY_CELL, dtype=CELL_DTYPE))

    @property
    def rows(self) -> int:
        return int(self.data.shape[0])

    @property
    def columns(self) -> int:
        return int(self.data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def cell(self, position: Position) -> str:
        return str(self.data[position.row, position.column])

    def lines(self) -> tuple[str, ...]:
        """Return each row joined into a string, top to bottom."""
        return tuple("".join(row) for row in self.data.tolist())


# ---------------------------------------------------------------------------
# HazardReport
# ---------------------------------------------------------------------------
class HazardReport(BaseModel):
    """Result of one hazard query (Value Object).

    Positions are unique and listed in discovery order. The report is not
    persisted; it describes the registry snapshot it was computed from.
    """

    rows: int = Field(ge=0)
    columns: int = Field(ge=0)
    positions: tuple[HazardPosition, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_report(self) -> "HazardReport":
        coordinates = [p.as_tuple() for p in self.positions]
        if len(set(coordinates)) != len(coordinates):
            raise ValueError("Hazard positions must be unique")
        for row, column in coordinates:
            if row >= self.rows or column >= self.columns:
                raise ValueError(f"Hazard position ({row}, {column}) outside grid")
        return self

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Position):
            item = item.as_tuple()
        return item in self.coordinates()

    def coordinates(self) -> frozenset[tuple[int, int]]:
        """Return the hazard cells as a set of (row, column) tuples."""
        return frozenset(p.as_tuple() for p in self.positions)

    def overlapping(self, antennas: Iterable[Antenna]) -> tuple[HazardPosition, ...]:
        """Return hazard cells that also host an antenna.

        Such overlaps are part of the report; they are never filtered out.
        """
        occupied = {a.position.as_tuple() for a in antennas}
        return tuple(p for p in self.positions if p.as_tuple() in occupied)
