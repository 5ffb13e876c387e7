"""Text map adapter for AntennaMapRepository.

Implements loading and rewriting of antenna maps stored as plain text: one
grid row per line, '.' for an empty cell and any other printable character
for an antenna frequency.

Load lifecycle:
1) Check the path exists and is a regular file
2) Optionally enforce the byte budget before reading
3) Read lines with a context manager, stripping line terminators
4) Drop empty trailing lines
5) Validate rectangularity and build the MapGrid (no partial grid on failure)

Save lifecycle:
1) Open the destination for writing (truncates; no atomic swap)
2) Write every row followed by a newline
3) Close the file on exit from the context manager

An interrupted save leaves the destination partially written.
"""

from __future__ import annotations

import logging
from pathlib import Path

from domain.antennas.errors import AllocationError, SourceUnavailableError
from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import MapGrid

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def _split_rows(text: str) -> list[str]:
    """Split file content into rows, ignoring empty trailing lines."""
    rows = text.split("\n")
    while rows and rows[-1] == "":
        rows.pop()
    return rows


class TextMapAdapter:
    """Infrastructure adapter for antenna maps in plain text files.

    Parameters
    ----------
    encoding: str
        Text encoding used for reading and writing.
    max_bytes: int | None
        Optional size budget for map files. If specified and exceeded by
        the file on disk, loading raises AllocationError before reading.
    """

    def __init__(
        self, encoding: str = DEFAULT_ENCODING, max_bytes: int | None = None
    ) -> None:
        self.encoding = encoding
        self.max_bytes = max_bytes

    def load_grid(self, file_path: Path | str) -> MapGrid:
        """Read a map file and return its MapGrid.

        Raises:
            SourceUnavailableError: If the file is missing or unreadable
            MapFormatError: If rows have different lengths
            AllocationError: If the file exceeds max_bytes or memory runs out
        """
        path = Path(file_path)

        # Log only the file name, never the full path
        if not path.exists():
            logger.error("Map %s not found", path.name)
            raise SourceUnavailableError(path.name, "does not exist")
        if not path.is_file():
            logger.error("Map %s is not a regular file", path.name)
            raise SourceUnavailableError(path.name, "is not a regular file")

        try:
            if self.max_bytes is not None:
                size = path.stat().st_size
                if size > self.max_bytes:
                    raise AllocationError(
                        f"Map size {size}B exceeds budget {self.max_bytes}B"
                    )
            with path.open("r", encoding=self.encoding, newline=None) as handle:
                text = handle.read()
        except OSError as e:
            logger.error(
                "Failed to read %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise SourceUnavailableError(path.name, "cannot be read") from e
        except UnicodeDecodeError as e:
            logger.error("Map %s is not valid %s text", path.name, self.encoding)
            raise SourceUnavailableError(
                path.name, f"is not valid {self.encoding} text"
            ) from e
        except MemoryError as e:
            raise AllocationError("Insufficient memory to read map") from e

        try:
            grid = MapGrid.from_lines(_split_rows(text))
        except MemoryError as e:
            raise AllocationError("Insufficient memory to build map grid") from e

        logger.debug("Map %s: Loaded %dx%d grid", path.name, grid.rows, grid.columns)
        return grid

    def save_grid(self, grid: MapGrid, file_path: Path | str) -> None:
        """Overwrite file_path with the rows of grid.

        Raises:
            SourceUnavailableError: If the file cannot be opened for writing.
                Previous content is left untouched in that case.
        """
        path = Path(file_path)
        try:
            with path.open("w", encoding=self.encoding, newline="\n") as handle:
                for line in grid.lines():
                    handle.write(line + "\n")
        except OSError as e:
            logger.error(
                "Failed to write %s (errno=%s, strerror=%s)",
                path.name,
                getattr(e, "errno", "unknown"),
                getattr(e, "strerror", "unknown"),
            )
            raise SourceUnavailableError(path.name, "cannot be written") from e

        logger.debug("Map %s: Wrote %dx%d grid", path.name, grid.rows, grid.columns)

    def persist(self, registry: AntennaRegistry, file_path: Path | str) -> None:
        """Rebuild the full grid from registry and overwrite file_path."""
        self.save_grid(registry.to_grid(), file_path)
