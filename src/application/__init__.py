"""Application Layer.

Services that orchestrate domain logic and infrastructure adapters, plus the
text reports shown to users. The domain layer never prints; formatting lives
here.
"""

from .antenna_map import AntennaMapService, MutationResult
from .reporting import (
    format_antenna_listing,
    format_error,
    format_hazard_table,
    format_removal,
)

__all__ = [
    "AntennaMapService",
    "MutationResult",
    "format_antenna_listing",
    "format_error",
    "format_hazard_table",
    "format_removal",
]
