"""Command-line report for an antenna map.

Usage:
    antenna-map MAP [--remove X Y]... [--insert F X Y]... [--verbose]

Loads MAP, lists its antennas, applies removals then insertions (each one
rewrites MAP), lists the antennas again and prints the hazard table.

Exit codes:
    0: Report printed (including maps without antennas)
    1: Map could not be loaded or rewritten
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from domain.antennas.errors import AntennaMapError, EmptyRegistryError
from infrastructure.antennas.text_map_adapter import TextMapAdapter

from .antenna_map import AntennaMapService
from .reporting import (
    format_antenna_listing,
    format_error,
    format_hazard_table,
    format_removal,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="antenna-map",
        description="List antennas in a map file and the cells next to them.",
    )
    parser.add_argument("map_file", help="Text map, one grid row per line")
    parser.add_argument(
        "--remove",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("X", "Y"),
        help="Remove the antenna at row X, column Y (repeatable)",
    )
    parser.add_argument(
        "--insert",
        nargs=3,
        action="append",
        default=[],
        metavar=("F", "X", "Y"),
        help="Insert an antenna of frequency F at row X, column Y (repeatable)",
    )
    parser.add_argument("--encoding", default="utf-8", help="Map file encoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    service = AntennaMapService(TextMapAdapter(encoding=args.encoding), args.map_file)

    try:
        service.load()
        service.require_antennas()
    except EmptyRegistryError as e:
        print(format_error(e))
        return 0
    except AntennaMapError as e:
        print(format_error(e))
        return 1

    print("Antenas carregadas:")
    print(format_antenna_listing(service.registry))

    if args.remove or args.insert:
        try:
            for x, y in args.remove:
                result = service.remove(x, y)
                print(format_removal(x, y, result.changed))
            for frequency, x, y in args.insert:
                result = service.insert(frequency, int(x), int(y))
                if result.error is not None:
                    print(format_error(result.error))
        except AntennaMapError as e:
            print(format_error(e))
            return 1
        except ValueError as e:
            # Invalid frequency symbol or non-integer coordinate
            print(f"Erro: {e}")
            return 1

        print("\nLista de antenas apos alteracoes:")
        print(format_antenna_listing(service.registry))

    print(format_hazard_table(service.hazards()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
