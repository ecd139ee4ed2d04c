"""Mini README: Abstract base class describing tour type behaviour.

Structure:
    * TourStrategy - colors, type specific configuration and scene discovery.

Implementations are chosen once when the orchestrator is built; a tour's
``eventType`` only selects between the already constructed strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..colors import ColorMap, ColorRegistry
from ..configuration import TourType
from ..errors import IssueLog
from ..logging_utils import get_logger
from ..manifest import TourManifest
from ..naming import NameClassifier, SceneSpec

LOGGER = get_logger(__name__)


class TourStrategy(ABC):
    """Base interface for tour type integrations."""

    tour_type: TourType = TourType.AUTOMOTIVE
    default_theme: str = "flow"
    lock_horizontal_fov: bool = False
    camera_limit_down: int = 50
    camera_limit_up: int = 180

    def __init__(
        self,
        *,
        classifier: Optional[NameClassifier] = None,
        issues: Optional[IssueLog] = None,
    ) -> None:
        self.classifier = classifier or NameClassifier()
        self.issues = issues if issues is not None else IssueLog()
        LOGGER.debug("Initialising %s strategy", self.tour_type.value)

    def camera_config(self) -> Dict[str, Any]:
        """Camera limits for the shared baseline configuration."""

        return {
            "lockHorizontalFov": self.lock_horizontal_fov,
            "enableLimits": True,
            "limitDown": self.camera_limit_down,
            "limitUp": self.camera_limit_up,
            "disableZoomInIframe": True,
        }

    def theme(self, manifest: TourManifest) -> str:
        return manifest.config.get("theme") or self.default_theme

    @abstractmethod
    def upload_colors(self, tour_path: Path, colors: ColorRegistry, *, tour: str = "") -> ColorMap:
        """Upload the tour's colors, returning an empty map when unsupported."""

    @abstractmethod
    def build_type_config(self, manifest: TourManifest, color_map: ColorMap) -> Dict[str, Any]:
        """Return type specific defaults layered over the shared baseline."""

    @abstractmethod
    def locate_scenes(self, tour_path: Path, color_map: ColorMap, *, tour: str = "") -> List[SceneSpec]:
        """Discover and group the tour's scene files."""

    def locate_floor_plans(self, tour_path: Path, *, tour: str = "") -> List[Path]:
        """Floor plan images to upload; none unless a strategy overrides this."""

        return []
