"""Mini README: Inverse mapping from a remote tour document to folders.

Structure:
    * extension_from_url - file extension of a media URL (``.png`` fallback).
    * media_filename - prefixed, zero-padded name of one scene media item.
    * DownloadResult - where the tour landed and how many files were written.
    * TourDownloader - writes ``_config.json``, colors, scenes and floor plans.

Generated layout (Automotive)::

    {code}/_config.json
    {code}/_colors/{external,internal}/{color-slug}.{ext}
    {code}/{automotiveType}/{color-slug}/{2d_,360_,seq_}*

Generated layout (Spaces)::

    {code}/_config.json
    {code}/scenes/{2d_,360_,seq_}*
    {code}/_floorplans/{floor-plan-slug}.{ext}

2d and 360 media are named ``{prefix}{scene-slug}_{NNN}``; the classifier
drops the ``_NNN`` index again on upload, giving back the scene name.
Sequence frames keep an existing ``seq_*`` name and are otherwise named
``seq_{NNN}``. Names are reserved per destination folder for the whole
download; a taken name moves on to the next free index, so scenes that share
a name never overwrite each other.
"""

from __future__ import annotations

import copy
import json
import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Mapping, Optional, Set
from urllib.parse import unquote, urlparse

from ..colors import AUTOMOTIVE_TYPES
from ..colors.registry import COLORS_FOLDER
from ..errors import FatalError, IssueLog, UploadError
from ..logging_utils import get_logger
from ..manifest import MANIFEST_FILENAME
from ..naming import SceneType, name_to_slug
from ..strategies.spaces import FLOOR_PLANS_FOLDER, SCENES_FOLDER

LOGGER = get_logger(__name__)

DEFAULT_EXTENSION = ".png"
DEFAULT_COLOR_FOLDER = "default"
_SEQUENCE_NAME = re.compile(r"^seq_", re.IGNORECASE)


def extension_from_url(url: str) -> str:
    return PurePosixPath(urlparse(url).path).suffix or DEFAULT_EXTENSION


def _url_filename(url: str) -> Optional[str]:
    """Last path segment of ``url``, or ``None`` unless it is a plain file name."""

    name = unquote(PurePosixPath(urlparse(url).path).name)
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        return None
    return name


def media_filename(
    scene_type: SceneType,
    scene_slug: str,
    index: int,
    url: str,
    *,
    keep_original: bool = True,
) -> str:
    """Name for the ``index``-th (1-based) media item of a scene."""

    extension = extension_from_url(url)
    padded = f"{index:03d}"
    if scene_type is SceneType.SEQUENCE:
        original = _url_filename(url) if keep_original else None
        if original and _SEQUENCE_NAME.match(original):
            return original
        return f"{scene_type.prefix}{padded}{extension}"
    return f"{scene_type.prefix}{scene_slug}_{padded}{extension}"


def claim_filename(taken: Set[str], scene_type: SceneType, scene_slug: str, index: int, url: str) -> str:
    """Reserve the first media name at or after ``index`` that is not in ``taken``."""

    filename = media_filename(scene_type, scene_slug, index, url)
    if filename.lower() in taken:
        filename = media_filename(scene_type, scene_slug, index, url, keep_original=False)
    while filename.lower() in taken:
        index += 1
        filename = media_filename(scene_type, scene_slug, index, url, keep_original=False)
    taken.add(filename.lower())
    return filename


def _scene_type(value: Optional[str]) -> SceneType:
    try:
        return SceneType(value or SceneType.PANORAMA.value)
    except ValueError:
        LOGGER.warning("Unknown sceneType '%s'; treating as 360", value)
        return SceneType.PANORAMA


def _reference_id(reference: Any) -> Optional[str]:
    if isinstance(reference, Mapping):
        reference = reference.get("_id")
    return str(reference) if reference else None


@dataclass(slots=True)
class DownloadResult:
    """Summary of one downloaded tour."""

    tour_path: Path
    total_files: int
    is_spaces: bool


class TourDownloader:
    """Write a fetched tour document back into the uploader's folder layout."""

    def __init__(self, client, *, issues: Optional[IssueLog] = None) -> None:
        self.client = client
        self.issues = issues if issues is not None else IssueLog()

    def fetch_and_download(self, tour_id: str, output_root: Path) -> DownloadResult:
        """Fetch a tour by id and download it under ``output_root``."""

        try:
            document = self.client.get_tour_view(tour_id)
        except UploadError as error:
            raise FatalError(f"Could not fetch tour {tour_id}: {error}") from error
        if not isinstance(document, dict) or not document.get("_id"):
            raise FatalError("Invalid VirtualTour data received")
        return self.download(document, output_root)

    def download(self, document: Mapping[str, Any], output_root: Path) -> DownloadResult:
        tour_name = document.get("virtualTourName") or ""
        tour_code = document.get("virtualTourCode") or name_to_slug(tour_name)
        if not tour_code:
            raise FatalError("Tour has neither a code nor a name to use as its folder")
        tour_path = Path(output_root) / tour_code
        is_spaces = document.get("eventType") == "Spaces"
        LOGGER.info(
            "Downloading tour '%s' [%s] into %s",
            tour_name,
            "Spaces" if is_spaces else "Automotive",
            tour_path,
        )

        if is_spaces:
            folders = [SCENES_FOLDER, FLOOR_PLANS_FOLDER]
        else:
            folders = [f"{COLORS_FOLDER}/{kind}" for kind in AUTOMOTIVE_TYPES] + list(AUTOMOTIVE_TYPES)
        for folder in folders:
            (tour_path / folder).mkdir(parents=True, exist_ok=True)

        total_files = 0
        color_slugs: Dict[str, Dict[str, str]] = {kind: {} for kind in AUTOMOTIVE_TYPES}
        if not is_spaces:
            total_files += self._download_colors(document, tour_path, tour_code, color_slugs)

        self._write_manifest(document, tour_path, tour_code)

        claimed: Dict[Path, Set[str]] = {}
        for scene in document.get("scenes") or []:
            total_files += self._download_scene(scene, tour_path, tour_code, is_spaces, color_slugs, claimed)

        if is_spaces:
            for floor_plan in document.get("floorPlans") or []:
                total_files += self._download_floor_plan(floor_plan, tour_path, tour_code)

        LOGGER.info("Tour downloaded: %s files in %s", total_files, tour_path)
        return DownloadResult(tour_path=tour_path, total_files=total_files, is_spaces=is_spaces)

    def _write_manifest(self, document: Mapping[str, Any], tour_path: Path, tour_code: str) -> None:
        config = copy.deepcopy(document.get("config") or {})
        # Color ids are regenerated by the next upload.
        config.pop("automotiveColors", None)
        manifest = {
            "virtualTourName": document.get("virtualTourName"),
            "virtualTourCode": tour_code,
            "description": document.get("description"),
            "eventType": document.get("eventType"),
            "config": config,
        }
        (tour_path / MANIFEST_FILENAME).write_text(json.dumps(manifest, indent=2), encoding="utf-8")

    def _fetch(self, url: str, destination: Path, tour_code: str, kind: str) -> int:
        try:
            self.client.download(url, destination)
        except UploadError as error:
            self.issues.record(tour_code, kind, destination.name, error)
            return 0
        return 1

    def _download_colors(
        self,
        document: Mapping[str, Any],
        tour_path: Path,
        tour_code: str,
        color_slugs: Dict[str, Dict[str, str]],
    ) -> int:
        written = 0
        automotive_colors = (document.get("config") or {}).get("automotiveColors") or {}
        for automotive_type in AUTOMOTIVE_TYPES:
            colors = automotive_colors.get(automotive_type) or []
            LOGGER.info("Found %s %s colors", len(colors), automotive_type)
            for color in colors:
                if not isinstance(color, Mapping):
                    self.issues.record(tour_code, "color", str(color), "color is not populated")
                    continue
                name = (color.get("meta") or {}).get("name")
                url = color.get("url")
                if not url or not name:
                    self.issues.record(tour_code, "color", str(color.get("_id")), "color has no url or name")
                    continue
                slug = name_to_slug(name)
                destination = tour_path / COLORS_FOLDER / automotive_type / f"{slug}{extension_from_url(url)}"
                if self._fetch(url, destination, tour_code, "color"):
                    color_slugs[automotive_type][str(color.get("_id"))] = slug
                    written += 1
        return written

    def _scene_folder(
        self,
        scene: Mapping[str, Any],
        scene_slug: str,
        tour_path: Path,
        is_spaces: bool,
        color_slugs: Dict[str, Dict[str, str]],
    ) -> Path:
        if is_spaces:
            return tour_path / SCENES_FOLDER
        automotive_type = scene.get("automotiveType") or "external"
        if automotive_type not in AUTOMOTIVE_TYPES:
            automotive_type = "external"
        color_id = _reference_id(scene.get("automotiveColor"))
        color_slug = color_slugs[automotive_type].get(color_id) if color_id else None
        # Without a known color the scene gets a folder of its own.
        return tour_path / automotive_type / (color_slug or scene_slug or DEFAULT_COLOR_FOLDER)

    def _download_scene(
        self,
        scene: Mapping[str, Any],
        tour_path: Path,
        tour_code: str,
        is_spaces: bool,
        color_slugs: Dict[str, Dict[str, str]],
        claimed: Dict[Path, Set[str]],
    ) -> int:
        scene_type = _scene_type(scene.get("sceneType"))
        scene_name = scene.get("sceneName") or ""
        scene_slug = name_to_slug(scene_name)
        folder = self._scene_folder(scene, scene_slug, tour_path, is_spaces, color_slugs)
        folder.mkdir(parents=True, exist_ok=True)

        media = scene.get("media") or []
        LOGGER.info("Scene %s (%s): %s files", scene_name, scene_type.value, len(media))
        taken = claimed.setdefault(folder, set())
        written = 0
        for index, item in enumerate(media, start=1):
            url = item.get("url") if isinstance(item, Mapping) else None
            if not url:
                self.issues.record(tour_code, "media", f"{scene_name} #{index}", "media item has no url")
                continue
            filename = claim_filename(taken, scene_type, scene_slug, index, url)
            written += self._fetch(url, folder / filename, tour_code, "media")
        return written

    def _download_floor_plan(self, floor_plan: Mapping[str, Any], tour_path: Path, tour_code: str) -> int:
        name = floor_plan.get("floorPlanName") or "floorplan"
        media = floor_plan.get("media")
        url = media.get("url") if isinstance(media, Mapping) else None
        if not url:
            self.issues.record(tour_code, "floor_plan", name, "floor plan has no media")
            return 0
        destination = tour_path / FLOOR_PLANS_FOLDER / f"{name_to_slug(name) or 'floorplan'}{extension_from_url(url)}"
        return self._fetch(url, destination, tour_code, "floor_plan")
