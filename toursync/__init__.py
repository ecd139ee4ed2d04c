"""Mini README: Core package initializer for toursync.

toursync mirrors a folder tree of panoramic and automotive media into a
remote virtual tour (colors, scenes and floor plans) and rebuilds that tree
from an existing tour. Subpackages:

    * naming - filename classification and scene grouping.
    * strategies - Automotive and Spaces tour behaviour.
    * tours - color uploads, tour assembly and the bulk orchestrator.
    * download - inverse mapping from a remote tour to folders.
    * api - HTTP client for the remote tour service.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
