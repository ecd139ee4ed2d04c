"""Mini README: Tests for the tour strategy registry.

Ensures that the built-in strategies register on import and that
instantiation by tour type works as expected.
"""

import pytest

from toursync.configuration import TourType
from toursync.errors import IssueLog
from toursync.strategies import STRATEGIES, AutomotiveStrategy, SpacesStrategy, StrategyRegistry, TourStrategy


def test_registry_contains_builtin_strategies():
    assert list(STRATEGIES.available_types()) == ["automotive", "spaces"]


def test_registry_instantiates_strategy_from_string():
    strategy = STRATEGIES.create("Spaces")
    assert isinstance(strategy, SpacesStrategy)
    assert strategy.tour_type is TourType.SPACES


def test_create_all_shares_issue_log():
    issues = IssueLog()
    strategies = STRATEGIES.create_all(issues=issues)

    assert isinstance(strategies[TourType.AUTOMOTIVE], AutomotiveStrategy)
    assert all(strategy.issues is issues for strategy in strategies.values())


def test_unknown_type_raises():
    registry = StrategyRegistry()
    registry.register(AutomotiveStrategy)

    with pytest.raises(KeyError):
        registry.create(TourType.SPACES)
    with pytest.raises(ValueError):
        registry.create("boats")


def test_strategies_are_tour_strategies():
    assert issubclass(AutomotiveStrategy, TourStrategy)
    assert issubclass(SpacesStrategy, TourStrategy)
