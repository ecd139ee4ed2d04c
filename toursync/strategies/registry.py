"""Mini README: Registry mapping tour types to strategy classes.

Structure:
    * StrategyRegistry - registration and instantiation of ``TourStrategy``
      implementations.
"""

from __future__ import annotations

from typing import Dict, Iterable, Type, Union

from .base import TourStrategy
from ..configuration import TourType
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StrategyRegistry:
    """Simple registry for mapping tour types to strategy classes."""

    def __init__(self) -> None:
        self._strategies: Dict[TourType, Type[TourStrategy]] = {}

    def register(self, strategy: Type[TourStrategy]) -> Type[TourStrategy]:
        """Register a strategy class under its ``tour_type``."""

        LOGGER.debug("Registering strategy '%s'", strategy.tour_type.value)
        self._strategies[strategy.tour_type] = strategy
        return strategy

    def available_types(self) -> Iterable[str]:
        return sorted(tour_type.value for tour_type in self._strategies)

    def create(self, tour_type: Union[TourType, str], **kwargs: object) -> TourStrategy:
        """Instantiate the strategy registered for ``tour_type``."""

        if not isinstance(tour_type, TourType):
            tour_type = TourType.from_str(tour_type)
        strategy_cls = self._strategies.get(tour_type)
        if not strategy_cls:
            raise KeyError(f"Unknown tour type '{tour_type.value}'")
        return strategy_cls(**kwargs)  # type: ignore[arg-type]

    def create_all(self, **kwargs: object) -> Dict[TourType, TourStrategy]:
        return {tour_type: self.create(tour_type, **kwargs) for tour_type in self._strategies}


STRATEGIES = StrategyRegistry()
