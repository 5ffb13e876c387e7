"""Antennas Bounded Context - Error Hierarchy.

Custom exceptions for antenna map operations.

Loading and persisting the text map raise SourceUnavailableError,
MapFormatError and AllocationError. Registry mutations raise
DuplicatePositionError and PositionOutOfBoundsError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.antennas.value_objects import Position


class AntennaMapError(Exception):
    """Base error for antenna map operations."""


class SourceUnavailableError(AntennaMapError):
    """Map storage cannot be opened for reading or writing.

    Attributes:
        name: File name of the map (never the full path)
    """

    def __init__(self, name: str, reason: str = "cannot be opened") -> None:
        self.name = name
        super().__init__(f"Map file {name!r} {reason}")


class MapFormatError(AntennaMapError):
    """Map content cannot be turned into a grid of antennas.

    Attributes:
        line_number: 1-based line where the problem was found
    """

    def __init__(self, line_number: int, message: str) -> None:
        self.line_number = line_number
        super().__init__(message)


class RaggedRowError(MapFormatError):
    """A map row differs in length from the first row.

    Attributes:
        expected: Expected row length (column count of the first row)
        actual: Length of the offending row
    """

    def __init__(self, line_number: int, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            line_number,
            f"Line {line_number} has {actual} columns, expected {expected}",
        )


class InvalidSymbolError(MapFormatError):
    """A map cell holds a character that cannot name a frequency.

    Attributes:
        column: 0-based column of the offending cell
        symbol: The offending character
    """

    def __init__(self, line_number: int, column: int, symbol: str) -> None:
        self.column = column
        self.symbol = symbol
        super().__init__(
            line_number,
            f"Line {line_number}, column {column}: invalid frequency symbol {symbol!r}",
        )


class AllocationError(AntennaMapError):
    """Grid or registry storage could not be allocated."""


class DuplicatePositionError(AntennaMapError):
    """An antenna already occupies the requested position.

    Attributes:
        position: The occupied Position
    """

    def __init__(self, position: "Position") -> None:
        self.position = position
        super().__init__(
            f"An antenna already exists at ({position.row}, {position.column})"
        )


class PositionOutOfBoundsError(AntennaMapError):
    """Position falls outside the map grid.

    Attributes:
        row: Requested row (may be negative)
        column: Requested column (may be negative)
        rows: Grid row count
        columns: Grid column count
    """

    def __init__(self, row: int, column: int, rows: int, columns: int) -> None:
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        super().__init__(
            f"Position ({row}, {column}) outside grid "
            f"[rows: 0 to {rows - 1}, columns: 0 to {columns - 1}]"
        )


class EmptyRegistryError(AntennaMapError):
    """No antennas are registered."""

    pass
