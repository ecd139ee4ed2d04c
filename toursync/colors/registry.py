"""Mini README: Upload automotive color textures and index them by slug.

Structure:
    * Color - one uploaded color texture.
    * ColorMap - ``external`` / ``internal`` slug maps built for one tour.
    * ColorRegistry - reads ``_colors/{type}/`` and uploads each texture.

A failed upload leaves the color out of the map and is recorded in the
issue log; it never aborts the tour.
"""

from __future__ import annotations

import re
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

from ..errors import IssueLog, UploadError
from ..logging_utils import get_logger
from ..naming import name_to_slug, slug_to_name
from ..utils.files import list_image_files

LOGGER = get_logger(__name__)

AUTOMOTIVE_TYPES = ("external", "internal")
COLORS_FOLDER = "_colors"
COLOR_ASSET_TYPE = "automotive-color"
PLACEHOLDER_HEX = "#000000"

_NON_CODE = re.compile(r"[^A-Z0-9]")


@dataclass(frozen=True, slots=True)
class Color:
    """An uploaded color texture."""

    slug: str
    name: str
    automotive_type: str
    remote_id: str


@dataclass(slots=True)
class ColorMap:
    """Slug to color lookups, one namespace per automotive type."""

    external: Dict[str, Color] = field(default_factory=dict)
    internal: Dict[str, Color] = field(default_factory=dict)

    def namespace(self, automotive_type: str) -> Dict[str, Color]:
        if automotive_type not in AUTOMOTIVE_TYPES:
            raise KeyError(f"Unknown automotive type '{automotive_type}'")
        return self.external if automotive_type == "external" else self.internal

    def add(self, color: Color) -> None:
        self.namespace(color.automotive_type)[color.slug] = color

    def lookup(self, automotive_type: str, slug: str) -> Optional[Color]:
        return self.namespace(automotive_type).get(name_to_slug(slug))

    def ids(self, automotive_type: str) -> List[str]:
        return [color.remote_id for color in self.namespace(automotive_type).values()]

    def __iter__(self) -> Iterator[Color]:
        yield from self.external.values()
        yield from self.internal.values()

    def __len__(self) -> int:
        return len(self.external) + len(self.internal)


def color_code(slug: str) -> str:
    """Short code sent as color metadata, e.g. ``negro-sport`` -> ``NEGRO-SPORT``."""

    return _NON_CODE.sub("-", slug.upper())[:20]


class ColorRegistry:
    """Upload every color texture of a tour and build its ``ColorMap``."""

    def __init__(
        self,
        client,
        *,
        pause_seconds: float = 0.1,
        issues: Optional[IssueLog] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.client = client
        self.pause_seconds = pause_seconds
        self.issues = issues if issues is not None else IssueLog()
        self._sleep = sleep

    def upload_all(self, tour_path: Path, *, tour: str = "") -> ColorMap:
        """Upload ``_colors/external`` and ``_colors/internal`` textures."""

        color_map = ColorMap()
        colors_path = Path(tour_path) / COLORS_FOLDER
        if not colors_path.is_dir():
            LOGGER.info("[%s] no %s folder; tour has no colors", tour, COLORS_FOLDER)
            return color_map

        pending = [
            (automotive_type, file_path)
            for automotive_type in AUTOMOTIVE_TYPES
            for file_path in list_image_files(colors_path / automotive_type)
        ]
        for index, (automotive_type, file_path) in enumerate(pending, start=1):
            LOGGER.info("[%s] uploading color %s/%s: %s", tour, index, len(pending), file_path.name)
            try:
                color = self.upload_color(file_path, automotive_type)
            except Exception as error:
                self.issues.record(tour, "color", f"{automotive_type}/{file_path.name}", error)
            else:
                color_map.add(color)
            self._sleep(self.pause_seconds)

        LOGGER.info("[%s] %s colors registered", tour, len(color_map))
        return color_map

    def upload_color(self, file_path: Path, automotive_type: str) -> Color:
        """Upload one texture with its color metadata."""

        slug = name_to_slug(file_path.stem)
        name = slug_to_name(file_path.stem)
        timestamp = int(time.time() * 1000)
        fields = {
            "isPublic": "true",
            "filePath": f".api/virtualTour/config.{automotive_type}/{timestamp}_{file_path.name}",
            "meta.id": str(uuid.uuid4()),
            "meta.name": name,
            "meta.hex": PLACEHOLDER_HEX,
            "meta.code": color_code(slug),
            "meta.type": COLOR_ASSET_TYPE,
        }
        response = self.client.upload_file(file_path, fields)
        remote_id = response.get("_id") if isinstance(response, dict) else None
        if not remote_id:
            raise UploadError(f"File store returned no id for {file_path.name}")
        return Color(slug=slug, name=name, automotive_type=automotive_type, remote_id=remote_id)
