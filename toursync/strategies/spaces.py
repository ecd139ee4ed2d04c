"""Mini README: Spaces tours (panoramas plus floor plans).

Folder layout::

    TOUR/scenes/{360_,2d_,seq_}*
    TOUR/_floorplans/{name}.{ext}

Spaces tours never upload colors. Scene files that match no naming rule are
still uploaded as 360 panoramas named after the file, because Spaces sources
are overwhelmingly unlabelled panoramas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from .base import TourStrategy
from .registry import STRATEGIES
from ..colors import ColorMap, ColorRegistry
from ..configuration import TourType
from ..logging_utils import get_logger
from ..manifest import TourManifest
from ..naming import ClassifiedFile, SceneType, group_scene_files, slug_to_name
from ..naming.grouping import SceneSpec
from ..utils.files import list_image_files

LOGGER = get_logger(__name__)

SCENES_FOLDER = "scenes"
FLOOR_PLANS_FOLDER = "_floorplans"


class SpacesStrategy(TourStrategy):
    """Property and venue walkthroughs."""

    tour_type = TourType.SPACES
    default_theme = "cascade"
    lock_horizontal_fov = True
    camera_limit_down = 90
    camera_limit_up = 115

    def upload_colors(self, tour_path: Path, colors: ColorRegistry, *, tour: str = "") -> ColorMap:
        return ColorMap()

    def build_type_config(self, manifest: TourManifest, color_map: ColorMap) -> Dict[str, Any]:
        return {
            "theme": self.theme(manifest),
            "automotiveColors": {"external": [], "internal": []},
            "floorPlan": {"showOpened": True},
            "hotspots": {
                "enableAudio": True,
                "allowToggle": False,
                "showInfospotTitle": True,
            },
            "navigation": {"mode": "normal", "legacyMode": "initial"},
        }

    def locate_scenes(self, tour_path: Path, color_map: ColorMap, *, tour: str = "") -> List[SceneSpec]:
        scenes_path = Path(tour_path) / SCENES_FOLDER
        images = list_image_files(scenes_path)
        if not images:
            LOGGER.warning("[%s] %s has no images", tour, scenes_path)
            return []

        classified, rejected = self.classifier.classify_folder(images)
        for path in rejected:
            LOGGER.debug("[%s] %s has no prefix; treating it as a 360 panorama", tour, path.name)
            classified.append(
                ClassifiedFile(
                    path=path,
                    scene_type=SceneType.PANORAMA,
                    scene_name=slug_to_name(path.stem),
                    original_name=path.stem,
                    auto_detected=True,
                )
            )
        classified.sort(key=lambda item: item.path.name)

        scenes = group_scene_files(classified, SCENES_FOLDER)
        LOGGER.info("[%s] found %s scenes", tour, len(scenes))
        return scenes

    def locate_floor_plans(self, tour_path: Path, *, tour: str = "") -> List[Path]:
        return list_image_files(Path(tour_path) / FLOOR_PLANS_FOLDER)


STRATEGIES.register(SpacesStrategy)
