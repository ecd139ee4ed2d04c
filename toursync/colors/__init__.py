"""Mini README: Automotive color handling.

Colors are uploaded once per tour and referenced by scenes through a
namespaced slug map (``external`` and ``internal`` are separate slug spaces).
"""

from .registry import AUTOMOTIVE_TYPES, Color, ColorMap, ColorRegistry

__all__ = ["AUTOMOTIVE_TYPES", "Color", "ColorMap", "ColorRegistry"]
