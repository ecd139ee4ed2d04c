"""Mini README: Shared fixtures for the toursync test-suite.

Structure:
    * FakeTourApi - in-memory stand-in for ``TourApiClient`` recording calls.
    * touch - create a small placeholder image file.
    * fake_api / make_run_config - fixtures used across test modules.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Set, Tuple

import pytest

from toursync.configuration import RunConfig, TourType
from toursync.errors import UploadError


def touch(path: Path, content: bytes = b"\x89PNG fake") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


class FakeTourApi:
    """Record every remote call and hand out sequential ids."""

    def __init__(self) -> None:
        self._counter = 0
        self.tours: Dict[str, Dict[str, Any]] = {}
        self.updates: List[Tuple[str, str, Dict[str, Any]]] = []
        self.files: List[Tuple[str, Dict[str, str]]] = []
        self.scenes: List[Dict[str, Any]] = []
        self.floor_plans: List[Tuple[str, str]] = []
        self.downloads: List[Tuple[str, Path]] = []
        self.views: Dict[str, Dict[str, Any]] = {}
        self.fail_tour_codes: Set[str] = set()
        self.fail_scene_names: Set[str] = set()
        self.fail_file_names: Set[str] = set()
        self.fail_floor_plan_names: Set[str] = set()
        self.fail_urls: Set[str] = set()
        self.crash_scene_names: Set[str] = set()
        self.crash_file_names: Set[str] = set()

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}-{self._counter}"

    def create(self, entity: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        if payload.get("virtualTourCode") in self.fail_tour_codes:
            raise UploadError("HTTP 500: tour rejected", status_code=500)
        tour_id = self._next_id("tour")
        self.tours[tour_id] = dict(payload)
        return {"_id": tour_id, "virtualTourName": payload.get("virtualTourName")}

    def update(self, entity: str, entity_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        self.updates.append((entity, entity_id, dict(payload)))
        return {"_id": entity_id}

    def upload_file(self, file_path: Path, fields: Mapping[str, str]) -> Dict[str, Any]:
        if Path(file_path).name in self.crash_file_names:
            raise RuntimeError("unexpected reply from file store")
        if Path(file_path).name in self.fail_file_names:
            raise UploadError("HTTP 413: too large", status_code=413)
        self.files.append((Path(file_path).name, dict(fields)))
        return {"_id": self._next_id("file")}

    def create_scene(self, fields: Mapping[str, str], media: Sequence[Path]) -> Dict[str, Any]:
        if fields["sceneName"] in self.fail_scene_names:
            raise UploadError("connection reset")
        if fields["sceneName"] in self.crash_scene_names:
            raise RuntimeError("scene endpoint crashed")
        scene_id = self._next_id("scene")
        self.scenes.append(
            {"_id": scene_id, "fields": dict(fields), "media": [Path(path).name for path in media]}
        )
        return {"_id": scene_id}

    def create_floor_plan(self, name: str, media: Path) -> Dict[str, Any]:
        if name in self.fail_floor_plan_names:
            raise UploadError("HTTP 502", status_code=502)
        floor_plan_id = self._next_id("floorplan")
        self.floor_plans.append((name, Path(media).name))
        return {"_id": floor_plan_id}

    def get_tour_view(self, tour_id: str) -> Dict[str, Any]:
        return self.views.get(tour_id, {})

    def download(self, url: str, destination: Path) -> Path:
        if url in self.fail_urls:
            raise UploadError(f"HTTP 404 for {url}", status_code=404)
        touch(Path(destination), url.encode("utf-8"))
        self.downloads.append((url, Path(destination)))
        return Path(destination)


@pytest.fixture
def fake_api() -> FakeTourApi:
    return FakeTourApi()


@pytest.fixture
def make_run_config():
    def _factory(source_root: Path, **overrides: Any) -> RunConfig:
        values: Dict[str, Any] = {
            "domain": "tours.example.test",
            "api_key": "secret",
            "source_root": source_root,
            "tour_type": TourType.AUTOMOTIVE,
            "color_pause_seconds": 0.0,
            "item_pause_seconds": 0.0,
        }
        values.update(overrides)
        return RunConfig(**values)

    return _factory
