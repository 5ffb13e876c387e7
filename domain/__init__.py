"""Antenna Map Domain Layer.

This package contains the core business logic organized by bounded contexts:
- antennas: Antenna registry, map grid, hazard detection
"""

from domain import antennas

__all__ = ["antennas"]
