"""Mini README: Tests for environment settings and run configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from toursync.configuration import RunConfig, TourSyncSettings, TourType
from toursync.errors import FatalError


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in ("DOMAIN", "API_KEY", "VIRTUAL_TOURS_PATH", "TOUR_NAME", "TOUR_TYPE", "LOG_LEVEL"):
        monkeypatch.delenv(f"TOURSYNC_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def test_tour_type_from_str() -> None:
    assert TourType.from_str(" Spaces ") is TourType.SPACES
    assert TourType.from_str("AUTOMOTIVE") is TourType.AUTOMOTIVE
    assert TourType.SPACES.event_type == "Spaces"
    with pytest.raises(ValueError):
        TourType.from_str("boats")


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("TOURSYNC_DOMAIN", "tours.example.test")
    monkeypatch.setenv("TOURSYNC_API_KEY", "secret")
    monkeypatch.setenv("TOURSYNC_TOUR_TYPE", "Spaces")
    monkeypatch.setenv("TOURSYNC_ITEM_PAUSE_SECONDS", "0.5")

    settings = TourSyncSettings()

    assert settings.domain == "tours.example.test"
    assert settings.tour_type is TourType.SPACES
    assert settings.item_pause_seconds == 0.5
    assert settings.virtual_tours_path == Path("virtualTours")


def test_overrides_win_over_settings(tmp_path) -> None:
    settings = TourSyncSettings(domain="env.example.test", api_key="env-key")

    run_config = settings.to_run_config(
        domain="cli.example.test",
        api_key=None,
        source_root=tmp_path,
        tour_name="DEMO",
        tour_type="spaces",
    )

    assert run_config.domain == "cli.example.test"
    assert run_config.api_key == "env-key"
    assert run_config.source_root == tmp_path
    assert run_config.tour_name == "DEMO"
    assert run_config.tour_type is TourType.SPACES
    assert run_config.item_pause_seconds == 0.2


def test_missing_credentials_are_fatal() -> None:
    with pytest.raises(FatalError, match="domain, api_key"):
        TourSyncSettings().to_run_config()


def test_run_config_is_frozen(tmp_path) -> None:
    run_config = RunConfig(domain="d", api_key="k", source_root=tmp_path)

    with pytest.raises(dataclasses.FrozenInstanceError):
        run_config.domain = "other"  # type: ignore[misc]
