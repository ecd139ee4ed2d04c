"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

import main_tour_sync
from toursync.configuration import get_settings

from conftest import touch

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch, tmp_path):
    for name in ("DOMAIN", "API_KEY", "VIRTUAL_TOURS_PATH", "TOUR_NAME", "TOUR_TYPE"):
        monkeypatch.delenv(f"TOURSYNC_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_bulk_without_credentials_fails() -> None:
    result = runner.invoke(main_tour_sync.cli, ["bulk"])

    assert result.exit_code == 1
    assert "Missing required configuration" in result.output


def test_bulk_with_missing_folder_fails(tmp_path) -> None:
    result = runner.invoke(
        main_tour_sync.cli,
        ["bulk", "--domain", "tours.example.test", "--api-key", "k", "--folder", str(tmp_path / "nope")],
    )

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_bulk_rejects_unknown_type(tmp_path) -> None:
    result = runner.invoke(
        main_tour_sync.cli,
        ["bulk", "--domain", "d", "--api-key", "k", "--folder", str(tmp_path), "--type", "boats"],
    )

    assert result.exit_code == 1
    assert "Unsupported tour type" in result.output


def test_bulk_uploads_with_fake_client(tmp_path, monkeypatch, fake_api) -> None:
    touch(tmp_path / "tours" / "DEMO" / "external" / "negro" / "360_front.jpg")
    monkeypatch.setattr(main_tour_sync, "_build_client", lambda run_config: fake_api)

    result = runner.invoke(
        main_tour_sync.cli,
        ["bulk", "--domain", "d", "--api-key", "k", "--folder", str(tmp_path / "tours")],
    )

    assert result.exit_code == 0, result.output
    assert "Successful: 1" in result.output
    assert len(fake_api.scenes) == 1


def test_download_prints_reupload_hint(tmp_path, monkeypatch, fake_api) -> None:
    fake_api.views["remote-1"] = {
        "_id": "remote-1",
        "virtualTourName": "Loft",
        "eventType": "Spaces",
        "scenes": [],
    }
    monkeypatch.setattr(main_tour_sync, "_build_client", lambda run_config: fake_api)

    result = runner.invoke(
        main_tour_sync.cli,
        ["download", "remote-1", "--output", str(tmp_path / "out"), "--domain", "d", "--api-key", "k"],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "loft" / "_config.json").is_file()
    assert "--tour loft" in result.output
