"""Mini README: Tour assembly and bulk upload orchestration.

Structure:
    * results - ``Tour``, ``TourResult`` and ``BatchResult`` records.
    * assembler - remote creation of tours, scenes and floor plans.
    * orchestrator - per-tour pipeline over a folder of tours.
"""

from .assembler import TourAssembler, build_base_config
from .orchestrator import UploadOrchestrator
from .results import BatchResult, Tour, TourResult

__all__ = [
    "BatchResult",
    "Tour",
    "TourAssembler",
    "TourResult",
    "UploadOrchestrator",
    "build_base_config",
]
