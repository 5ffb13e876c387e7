"""Text reports for antenna maps.

Pure functions returning strings; callers decide where to print them.
"""

from __future__ import annotations

from domain.antennas.errors import (
    AllocationError,
    AntennaMapError,
    DuplicatePositionError,
    EmptyRegistryError,
    InvalidSymbolError,
    PositionOutOfBoundsError,
    RaggedRowError,
    SourceUnavailableError,
)
from domain.antennas.registry import AntennaRegistry
from domain.antennas.value_objects import HazardReport

TABLE_RULE = "==========="
TABLE_HEADER = "| X  | Y  |"
HAZARD_TITLE = "Locais com efeito nefasto:"
EMPTY_LISTING = "Nenhuma antena registrada."


def format_antenna_listing(registry: AntennaRegistry) -> str:
    """One line per antenna: ``Antenna <freq> em (<x>, <y>)``."""
    if registry.is_empty:
        return EMPTY_LISTING
    return "\n".join(
        f"Antenna {a.frequency} em ({a.x}, {a.y})" for a in registry.iter_antennas()
    )


def format_hazard_table(report: HazardReport) -> str:
    """Bordered table of hazard cells, coordinates right-aligned to width 2."""
    lines = ["", HAZARD_TITLE, TABLE_RULE, TABLE_HEADER, TABLE_RULE]
    lines.extend(f"| {p.row:2d} | {p.column:2d} |" for p in report.positions)
    lines.append(TABLE_RULE)
    return "\n".join(lines)


def format_error(error: AntennaMapError) -> str:
    """Informational line for an error."""
    if isinstance(error, SourceUnavailableError):
        return f"Erro ao abrir o ficheiro {error.name}"
    if isinstance(error, RaggedRowError):
        return "Erro: Linhas de tamanhos diferentes encontradas."
    if isinstance(error, InvalidSymbolError):
        return (
            f"Erro: Simbolo invalido {error.symbol!r} na linha {error.line_number}, "
            f"coluna {error.column}"
        )
    if isinstance(error, DuplicatePositionError):
        return (
            "Erro: Ja existe uma antena na posicao "
            f"({error.position.row}, {error.position.column})"
        )
    if isinstance(error, PositionOutOfBoundsError):
        return f"Erro: Posicao ({error.row}, {error.column}) fora do mapa"
    if isinstance(error, AllocationError):
        return "Erro ao alocar memoria."
    if isinstance(error, EmptyRegistryError):
        return "Nenhuma antena encontrada."
    return f"Erro: {error}"


def format_removal(x: int, y: int, removed: bool) -> str:
    """Line reporting the outcome of a removal."""
    if removed:
        return f"Antena removida em ({x}, {y})"
    return f"Nenhuma antena em ({x}, {y})"
