"""Mini README: Tests for slug helpers and the filename classifier.

Covers prefix classification, removal of per-file indexes for 2d/360,
heuristic fallbacks for unprefixed names, and the deliberate asymmetry
between ``slug_to_name`` and ``name_to_slug``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from toursync.errors import ClassificationError, IssueLog
from toursync.naming import NameClassifier, SceneType, extract_number, name_to_slug, slug_to_name


def test_slug_to_name_title_cases_words() -> None:
    assert slug_to_name("negro-sport") == "Negro Sport"
    assert slug_to_name("blanco_almendra") == "Blanco Almendra"
    assert slug_to_name("  GRIS--plata ") == "Gris Plata"
    assert slug_to_name("") == ""


def test_name_to_slug_strips_accents_and_symbols() -> None:
    assert name_to_slug("Blanco Almendra") == "blanco-almendra"
    assert name_to_slug("Rojo Pasión") == "rojo-pasion"
    assert name_to_slug("  Azul / Eléctrico!! ") == "azul-electrico"


@pytest.mark.parametrize("value", ["Negro Sport", "rojo_pasión", "--Ya--slug--", "Çà & Ñu 2024"])
def test_name_to_slug_is_idempotent(value: str) -> None:
    once = name_to_slug(value)
    assert name_to_slug(once) == once


def test_round_trip_only_holds_for_canonical_names() -> None:
    """Humanising title-cases words, so non-canonical names do not survive."""

    assert slug_to_name(name_to_slug("Negro Sport")) == "Negro Sport"
    assert slug_to_name(name_to_slug("McLaren Orange")) == "Mclaren Orange"
    assert name_to_slug(slug_to_name("negro-sport")) == "negro-sport"


def test_extract_number_reads_trailing_digits() -> None:
    assert extract_number("seq_010") == 10
    assert extract_number("angle_7.png") == 7
    assert extract_number("seq_front") is None


@pytest.mark.parametrize(
    ("filename", "scene_type", "scene_name"),
    [
        ("2d_dash_001.jpg", SceneType.TWO_D, "Dash"),
        ("2D_front-seat_12.jpeg", SceneType.TWO_D, "Front Seat"),
        ("2d_dash.jpg", SceneType.TWO_D, "Dash"),
        ("360_cabin.webp", SceneType.PANORAMA, "Cabin"),
        ("360_rear_bench_7.png", SceneType.PANORAMA, "Rear Bench"),
        ("360_lobby_1000.jpg", SceneType.PANORAMA, "Lobby 1000"),
        ("seq_a_01.png", SceneType.SEQUENCE, "A 01"),
        ("SEQ_spin.png", SceneType.SEQUENCE, "Spin"),
    ],
)
def test_prefixed_names(filename: str, scene_type: SceneType, scene_name: str) -> None:
    classified = NameClassifier().classify(filename)
    assert classified.scene_type is scene_type
    assert classified.scene_name == scene_name
    assert not classified.auto_detected


@pytest.mark.parametrize("index", ["1", "01", "001", "999"])
@pytest.mark.parametrize("prefix", ["2d_", "360_"])
def test_index_suffix_never_leaks_into_name(prefix: str, index: str) -> None:
    classified = NameClassifier().classify(f"{prefix}driver_view_{index}.jpg")
    assert classified.scene_name == "Driver View"


@pytest.mark.parametrize(
    ("filename", "scene_type", "scene_name"),
    [
        ("angle_01.png", SceneType.SEQUENCE, "Angle"),
        ("frame7.png", SceneType.SEQUENCE, "Frame"),
        ("turntable-024.jpg", SceneType.SEQUENCE, "Turntable"),
        ("living_room_pano.jpg", SceneType.PANORAMA, "Living Room Pano"),
        ("Equirect-Hall.webp", SceneType.PANORAMA, "Equirect Hall"),
        ("panocube_roof.png", SceneType.PANORAMA, "Panocube Roof"),
    ],
)
def test_heuristic_fallbacks(filename: str, scene_type: SceneType, scene_name: str) -> None:
    classified = NameClassifier().classify(filename)
    assert classified.scene_type is scene_type
    assert classified.scene_name == scene_name
    assert classified.auto_detected


def test_unrecognised_name_raises() -> None:
    with pytest.raises(ClassificationError, match="no valid prefix"):
        NameClassifier().classify("cover.jpg")


def test_classify_folder_records_rejected_files() -> None:
    issues = IssueLog()
    classified, rejected = NameClassifier().classify_folder(
        [Path("2d_dash.jpg"), Path("cover.jpg")], issues=issues, tour="DEMO"
    )

    assert [item.path.name for item in classified] == ["2d_dash.jpg"]
    assert rejected == [Path("cover.jpg")]
    [issue] = issues.for_tour("DEMO", "file")
    assert issue.item == "cover.jpg"
