"""Infrastructure adapters for the antennas bounded context.

This module provides the infrastructure layer implementations for antenna
map operations, including reading and rewriting plain text maps.
"""

from .text_map_adapter import TextMapAdapter

__all__ = ["TextMapAdapter"]
