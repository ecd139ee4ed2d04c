"""Mini README: Error taxonomy and the per-item issue collector.

Structure:
    * TourSyncError - base class for every error raised by toursync.
    * ClassificationError - a filename carries no recognisable scene prefix.
    * UploadError - a single remote request failed (network or HTTP status).
    * TourError - a whole tour could not be processed.
    * FatalError - configuration or discovery problem that ends the run.
    * ItemIssue / IssueLog - structured record of items dropped during a run.

Errors are recovered as low as possible: files are dropped at
classification time, colors, scenes and floor plans at item level, and tours
at orchestrator level. Only ``FatalError`` reaches the command line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .logging_utils import get_logger

LOGGER = get_logger(__name__)


class TourSyncError(Exception):
    """Base class for toursync failures."""


class ClassificationError(TourSyncError, ValueError):
    """Raised when a filename cannot be mapped to a scene type."""


class UploadError(TourSyncError):
    """Raised when a remote request for a single item fails."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class TourError(TourSyncError):
    """Raised when a tour cannot be created or processed."""


class FatalError(TourSyncError):
    """Raised for errors that abort the entire run."""


@dataclass(frozen=True, slots=True)
class ItemIssue:
    """One item that was skipped, with the reason it was skipped."""

    tour: str
    kind: str
    item: str
    reason: str

    def as_dict(self) -> Dict[str, str]:
        return {"tour": self.tour, "kind": self.kind, "item": self.item, "reason": self.reason}


class IssueLog:
    """Collect per-item failures so short counts can be explained later."""

    def __init__(self) -> None:
        self._issues: List[ItemIssue] = []

    def record(self, tour: str, kind: str, item: str, reason: object) -> ItemIssue:
        issue = ItemIssue(tour=tour, kind=kind, item=item, reason=str(reason))
        self._issues.append(issue)
        LOGGER.warning("[%s] skipped %s '%s': %s", tour, kind, item, issue.reason)
        return issue

    def for_tour(self, tour: str, kind: Optional[str] = None) -> List[ItemIssue]:
        return [
            issue
            for issue in self._issues
            if issue.tour == tour and (kind is None or issue.kind == kind)
        ]

    def of_kind(self, kind: str) -> List[ItemIssue]:
        return [issue for issue in self._issues if issue.kind == kind]

    def __iter__(self) -> Iterator[ItemIssue]:
        return iter(list(self._issues))

    def __len__(self) -> int:
        return len(self._issues)
