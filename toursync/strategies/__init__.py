"""Mini README: Tour type strategies.

``base`` defines the capability set every tour type implements, ``registry``
maps tour types to strategy classes, and ``automotive`` / ``spaces`` hold
the built-in implementations, which register themselves on import.
"""

from .base import TourStrategy
from .registry import STRATEGIES, StrategyRegistry
from .automotive import AutomotiveStrategy
from .spaces import SpacesStrategy

__all__ = [
    "AutomotiveStrategy",
    "STRATEGIES",
    "SpacesStrategy",
    "StrategyRegistry",
    "TourStrategy",
]
