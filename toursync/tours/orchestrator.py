"""Mini README: Bulk upload of a folder of tours.

Structure:
    * UploadOrchestrator - discovers tour folders and runs the per-tour
      pipeline, producing one ``TourResult`` per tour.

Per-tour pipeline::

    load manifest -> [automotive: upload colors] -> create tour
        -> create scenes -> [spaces: create floor plans] -> link entities

Requests run strictly one after another with a fixed pause between items.
A failed color, scene or floor plan is recorded in the issue log and lowers
the tour's counts. A failed tour is recorded as a failed result and the batch
moves on. Only discovery problems raise ``FatalError``.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..colors import ColorMap, ColorRegistry
from ..configuration import RunConfig, TourType
from ..errors import FatalError, IssueLog
from ..logging_utils import get_logger
from ..manifest import load_manifest
from ..naming import NameClassifier, SceneSpec, slug_to_name
from ..strategies import STRATEGIES, StrategyRegistry, TourStrategy
from ..utils.files import list_subfolders
from .assembler import TourAssembler
from .results import BatchResult, Tour, TourResult

LOGGER = get_logger(__name__)


class UploadOrchestrator:
    """Turn every tour folder under ``run_config.source_root`` into a remote tour."""

    def __init__(
        self,
        run_config: RunConfig,
        client,
        *,
        registry: StrategyRegistry = STRATEGIES,
        classifier: Optional[NameClassifier] = None,
        issues: Optional[IssueLog] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.run_config = run_config
        self.client = client
        self.issues = issues if issues is not None else IssueLog()
        self._sleep = sleep
        self._clock = clock
        self.colors = ColorRegistry(
            client,
            pause_seconds=run_config.color_pause_seconds,
            issues=self.issues,
            sleep=sleep,
        )
        self.assembler = TourAssembler(client)
        self.strategies: Dict[TourType, TourStrategy] = registry.create_all(
            classifier=classifier or NameClassifier(),
            issues=self.issues,
        )

    def discover_tours(self) -> List[str]:
        """Return tour folder names, honouring the optional single-tour filter."""

        root = self.run_config.source_root
        if not root.is_dir():
            raise FatalError(f"Tours folder {root} does not exist")

        folders = [folder.name for folder in list_subfolders(root)]
        if self.run_config.tour_name:
            folders = [name for name in folders if name == self.run_config.tour_name]
            if not folders:
                raise FatalError(f"Tour '{self.run_config.tour_name}' not found in {root}")
        return folders

    def run(self) -> BatchResult:
        """Process every discovered tour; one failing tour never stops the batch."""

        started = self._clock()
        folders = self.discover_tours()
        if not folders:
            LOGGER.warning("No tour folders found in %s", self.run_config.source_root)
            return BatchResult(results=[], elapsed_seconds=self._clock() - started)

        LOGGER.info("Found %s tour(s): %s", len(folders), ", ".join(folders))
        results: List[TourResult] = []
        for index, folder_name in enumerate(folders, start=1):
            LOGGER.info("[%s/%s] processing tour %s", index, len(folders), folder_name)
            try:
                result = self.process_tour(folder_name)
            except Exception as error:
                LOGGER.error("[%s] tour failed: %s", folder_name, error)
                result = TourResult.failure(folder_name, error)
            else:
                LOGGER.info(
                    "[%s] tour completed: %s scenes, %s colors, %s floor plans",
                    folder_name,
                    result.scenes_count,
                    result.colors_count,
                    result.floor_plans_count,
                )
            results.append(result)

        return BatchResult(results=results, elapsed_seconds=self._clock() - started)

    def strategy_for(self, tour_type: TourType) -> TourStrategy:
        return self.strategies[tour_type]

    def process_tour(self, folder_name: str) -> TourResult:
        """Run the full pipeline for one tour folder."""

        tour_path = self.run_config.source_root / folder_name
        manifest = load_manifest(tour_path, issues=self.issues, tour=folder_name)
        tour_type = manifest.tour_type or self.run_config.tour_type
        strategy = self.strategy_for(tour_type)
        LOGGER.info(
            "[%s] config: %s [%s]",
            folder_name,
            manifest.virtual_tour_name or slug_to_name(folder_name),
            tour_type.value,
        )

        color_map: ColorMap = strategy.upload_colors(tour_path, self.colors, tour=folder_name)
        tour = self.assembler.create_tour(folder_name, manifest, color_map, strategy)

        specs = strategy.locate_scenes(tour_path, color_map, tour=folder_name)
        scene_ids = self._create_scenes(tour, specs)
        floor_plan_ids = self._create_floor_plans(
            tour, strategy.locate_floor_plans(tour_path, tour=folder_name)
        )
        self.assembler.link_entities(tour.remote_id, scene_ids, floor_plan_ids)

        return TourResult(
            tour=folder_name,
            success=True,
            tour_id=tour.remote_id,
            tour_name=tour.display_name,
            tour_type=tour_type,
            colors_count=len(color_map),
            scenes_count=len(scene_ids),
            floor_plans_count=len(floor_plan_ids),
        )

    def _create_scenes(self, tour: Tour, specs: Sequence[SceneSpec]) -> List[str]:
        if not specs:
            LOGGER.warning("[%s] no scenes found", tour.code)
            return []

        scene_ids: List[str] = []
        for index, spec in enumerate(specs, start=1):
            LOGGER.info(
                "[%s] scene %s/%s: %s (%s, %s files)",
                tour.code,
                index,
                len(specs),
                spec.name,
                spec.scene_type.value,
                len(spec.files),
            )
            try:
                scene_ids.append(self.assembler.create_scene(spec))
            except Exception as error:
                self.issues.record(tour.code, "scene", f"{spec.name} ({spec.scene_type.value})", error)
            self._sleep(self.run_config.item_pause_seconds)
        return scene_ids

    def _create_floor_plans(self, tour: Tour, images: Sequence[Path]) -> List[str]:
        floor_plan_ids: List[str] = []
        for image in images:
            name = slug_to_name(image.stem)
            try:
                floor_plan_ids.append(self.assembler.create_floor_plan(name, image))
            except Exception as error:
                self.issues.record(tour.code, "floor_plan", image.name, error)
            self._sleep(self.run_config.item_pause_seconds)
        if images:
            LOGGER.info("[%s] created %s/%s floor plans", tour.code, len(floor_plan_ids), len(images))
        return floor_plan_ids
