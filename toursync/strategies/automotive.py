"""Mini README: Automotive tours (colors plus external/internal scenes).

Folder layout::

    TOUR/_colors/{external,internal}/{color}.{ext}
    TOUR/{external|exterior|internal|interior}/{color-slug}/{2d_,360_,seq_}*

Each color sub-folder is grouped independently. A sub-folder whose slug has
no uploaded color still produces scenes, with no color reference attached.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from .base import TourStrategy
from .registry import STRATEGIES
from ..colors import AUTOMOTIVE_TYPES, ColorMap, ColorRegistry
from ..configuration import TourType
from ..logging_utils import get_logger
from ..manifest import TourManifest
from ..naming import SceneSpec, group_scene_files
from ..utils.files import list_image_files, list_subfolders

LOGGER = get_logger(__name__)

SCENE_FOLDERS = (
    ("external", "external"),
    ("exterior", "external"),
    ("internal", "internal"),
    ("interior", "internal"),
)


class AutomotiveStrategy(TourStrategy):
    """Vehicle tours with color variants."""

    tour_type = TourType.AUTOMOTIVE
    default_theme = "flow"
    lock_horizontal_fov = False
    camera_limit_down = 50
    camera_limit_up = 180

    def upload_colors(self, tour_path: Path, colors: ColorRegistry, *, tour: str = "") -> ColorMap:
        return colors.upload_all(tour_path, tour=tour)

    def build_type_config(self, manifest: TourManifest, color_map: ColorMap) -> Dict[str, Any]:
        return {
            "theme": self.theme(manifest),
            "automotiveColors": {
                automotive_type: color_map.ids(automotive_type) for automotive_type in AUTOMOTIVE_TYPES
            },
        }

    def locate_scenes(self, tour_path: Path, color_map: ColorMap, *, tour: str = "") -> List[SceneSpec]:
        scenes: List[SceneSpec] = []
        for folder_name, automotive_type in SCENE_FOLDERS:
            for color_folder in list_subfolders(Path(tour_path) / folder_name):
                scenes.extend(self._color_folder_scenes(color_folder, automotive_type, color_map, tour))
        LOGGER.info("[%s] found %s scenes", tour, len(scenes))
        return scenes

    def _color_folder_scenes(
        self, color_folder: Path, automotive_type: str, color_map: ColorMap, tour: str
    ) -> List[SceneSpec]:
        images = list_image_files(color_folder)
        if not images:
            LOGGER.warning("[%s] %s has no images; skipping", tour, color_folder)
            return []

        classified, _ = self.classifier.classify_folder(images, issues=self.issues, tour=tour)
        if not classified:
            LOGGER.warning("[%s] no classifiable files in %s; skipping", tour, color_folder)
            return []

        color = color_map.lookup(automotive_type, color_folder.name)
        if color is None:
            self.issues.record(
                tour,
                "color",
                f"{automotive_type}/{color_folder.name}",
                "no uploaded color matches this folder; scenes created without a color",
            )

        scenes = group_scene_files(classified, color_folder.name)
        for scene in scenes:
            scene.automotive_type = automotive_type
            scene.color = color
        return scenes


STRATEGIES.register(AutomotiveStrategy)
