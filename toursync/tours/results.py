"""Mini README: Records produced while uploading tours.

Structure:
    * Tour - a tour created on the remote service during this run.
    * TourResult - terminal state of one tour (success with counts or failure).
    * BatchResult - every tour result of a run plus elapsed time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..configuration import TourType


@dataclass(slots=True)
class Tour:
    """Remote tour created from one folder."""

    code: str
    display_name: str
    description: str
    tour_type: TourType
    type_config: Dict[str, Any]
    remote_id: str


@dataclass(slots=True)
class TourResult:
    """Outcome for one discovered tour folder."""

    tour: str
    success: bool
    tour_id: Optional[str] = None
    tour_name: Optional[str] = None
    tour_type: Optional[TourType] = None
    colors_count: int = 0
    scenes_count: int = 0
    floor_plans_count: int = 0
    error: Optional[str] = None

    @classmethod
    def failure(cls, tour: str, error: object) -> "TourResult":
        return cls(tour=tour, success=False, error=str(error) or error.__class__.__name__)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "tour": self.tour,
            "success": self.success,
            "virtualTourId": self.tour_id,
            "virtualTourName": self.tour_name,
            "tourType": self.tour_type.value if self.tour_type else None,
            "colorsCount": self.colors_count,
            "scenesCount": self.scenes_count,
            "floorPlansCount": self.floor_plans_count,
            "error": self.error,
        }


@dataclass(slots=True)
class BatchResult:
    """All tour results of one bulk run."""

    results: List[TourResult] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def successful(self) -> List[TourResult]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> List[TourResult]:
        return [result for result in self.results if not result.success]
