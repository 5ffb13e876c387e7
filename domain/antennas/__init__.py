"""Antennas Bounded Context.

Responsible for the antenna map and its hazard analysis:
- Value Objects: Position, Antenna, MapGrid, HazardReport
- Aggregate: AntennaRegistry
- Services: detect_hazards
"""
