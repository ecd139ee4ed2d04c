"""Mini README: Build and send tour, scene and floor plan creation requests.

Structure:
    * build_base_config - UI, panorama, camera and sequence defaults.
    * TourAssembler - single-entity remote operations.

Tour configuration is merged in three layers of increasing precedence: the
shared baseline (with the strategy's camera limits), the strategy's type
config, then the manifest's own ``config`` object. The merge is shallow, so a
manifest key replaces the whole default value under that key.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..colors import ColorMap
from ..errors import TourError, UploadError
from ..logging_utils import get_logger
from ..manifest import TourManifest
from ..naming import SceneSpec, slug_to_name
from ..strategies import TourStrategy
from .results import Tour

LOGGER = get_logger(__name__)

TOUR_ENTITY = "virtualtour"
NO_COLOR = "null"
DEFAULT_AUTOMOTIVE_TYPE = "external"


def build_base_config(camera: Dict[str, Any]) -> Dict[str, Any]:
    """Configuration shared by every tour type."""

    return {
        "ui": {
            "fullscreen": True,
            "enableRibbon": True,
            "hideRibbonAtStart": False,
            "splash": {"enabled": False},
            "isHideShareButton": False,
        },
        "panorama": {
            "tinyPlanet": False,
            "autoRotate": True,
            "autoRotateSpeed": 1,
        },
        "camera": dict(camera),
        "sequence": {
            "drag": {"enabled": True, "swipeable": True, "speed": 100, "reverse": False},
            "autoplay": {"enabled": False, "speed": 100},
            "zoom": {"pointerZoom": False, "scale": 1.5},
            "ui": {"showBadge": False, "showFrameIndicator": True},
        },
    }


def _remote_id(response: object, what: str) -> str:
    remote_id = response.get("_id") if isinstance(response, dict) else None
    if not remote_id:
        raise UploadError(f"Remote service returned no id for {what}")
    return str(remote_id)


class TourAssembler:
    """Issue creation and link requests for one tour's entities."""

    def __init__(self, client) -> None:
        self.client = client

    def build_payload(
        self,
        folder_name: str,
        manifest: TourManifest,
        color_map: ColorMap,
        strategy: TourStrategy,
    ) -> Dict[str, Any]:
        tour_name = manifest.virtual_tour_name or slug_to_name(folder_name)
        config: Dict[str, Any] = {
            **build_base_config(strategy.camera_config()),
            **strategy.build_type_config(manifest, color_map),
            **manifest.config,
        }
        return {
            "virtualTourName": tour_name,
            "virtualTourCode": folder_name,
            "description": manifest.description or f"Virtual tour: {tour_name}",
            "eventType": strategy.tour_type.event_type,
            "config": config,
        }

    def create_tour(
        self,
        folder_name: str,
        manifest: TourManifest,
        color_map: ColorMap,
        strategy: TourStrategy,
    ) -> Tour:
        """Create the remote tour; any failure is fatal to this tour only."""

        payload = self.build_payload(folder_name, manifest, color_map, strategy)
        try:
            response = self.client.create(TOUR_ENTITY, payload)
            remote_id = _remote_id(response, f"tour {folder_name}")
        except UploadError as error:
            raise TourError(f"Could not create tour '{folder_name}': {error}") from error

        LOGGER.info("[%s] created tour %s", folder_name, remote_id)
        return Tour(
            code=folder_name,
            display_name=response.get("virtualTourName") or payload["virtualTourName"],
            description=payload["description"],
            tour_type=strategy.tour_type,
            type_config=payload["config"],
            remote_id=remote_id,
        )

    def create_scene(self, spec: SceneSpec) -> str:
        """Create one scene carrying all of its files in order."""

        if not spec.files:
            raise ValueError(f"Scene '{spec.name}' has no files")
        fields = {
            "sceneName": spec.name,
            "sceneType": spec.scene_type.value,
            "automotiveType": spec.automotive_type or DEFAULT_AUTOMOTIVE_TYPE,
            "automotiveColor": spec.color_id or NO_COLOR,
        }
        response = self.client.create_scene(fields, spec.files)
        return _remote_id(response, f"scene {spec.name}")

    def create_floor_plan(self, name: str, media: Path) -> str:
        response = self.client.create_floor_plan(name, media)
        return _remote_id(response, f"floor plan {name}")

    def link_entities(
        self,
        tour_id: str,
        scene_ids: Sequence[str],
        floor_plan_ids: Sequence[str],
    ) -> bool:
        """Attach scene and floor plan ids to the tour in one update.

        Empty collections are left out; nothing is sent when both are empty.
        """

        payload: Dict[str, List[str]] = {}
        if scene_ids:
            payload["scenes"] = list(scene_ids)
        if floor_plan_ids:
            payload["floorPlans"] = list(floor_plan_ids)
        if not payload:
            LOGGER.info("Tour %s has nothing to link", tour_id)
            return False
        self.client.update(TOUR_ENTITY, tour_id, payload)
        LOGGER.info(
            "Linked %s scenes and %s floor plans to tour %s",
            len(scene_ids),
            len(floor_plan_ids),
            tour_id,
        )
        return True
