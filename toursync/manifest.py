"""Mini README: The optional per-tour ``_config.json`` manifest.

Structure:
    * TourManifest - Pydantic model mirroring the JSON keys.
    * load_manifest - read a tour folder's manifest, tolerating bad files.

Shape on disk::

    {"virtualTourName": "...", "description": "...",
     "eventType": "Automotive" | "Spaces", "config": {...}}

Unknown keys (for example ``virtualTourCode`` written by the downloader) are
kept but ignored.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, validator

from .configuration import TourType
from .errors import IssueLog
from .logging_utils import get_logger

LOGGER = get_logger(__name__)

MANIFEST_FILENAME = "_config.json"


class TourManifest(BaseModel):
    """Tour metadata and configuration overrides supplied by the user."""

    virtual_tour_name: Optional[str] = Field(None, alias="virtualTourName")
    description: Optional[str] = None
    event_type: Optional[str] = Field(None, alias="eventType")
    config: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        populate_by_name = True
        extra = "allow"

    @validator("config", pre=True)
    def _config_must_be_mapping(cls, value: object) -> Dict[str, Any]:
        return value if isinstance(value, dict) else {}

    @property
    def tour_type(self) -> Optional[TourType]:
        """Tour type requested by ``eventType``, if it names a known type."""

        if not self.event_type:
            return None
        try:
            return TourType.from_str(self.event_type)
        except ValueError:
            LOGGER.warning("Ignoring unknown eventType '%s'", self.event_type)
            return None


def load_manifest(tour_path: Path, *, issues: Optional[IssueLog] = None, tour: str = "") -> TourManifest:
    """Load ``_config.json`` or fall back to an empty manifest."""

    manifest_path = Path(tour_path) / MANIFEST_FILENAME
    if not manifest_path.is_file():
        return TourManifest()

    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("top-level JSON value must be an object")
        return TourManifest(**data)
    except (OSError, ValueError, ValidationError) as error:
        if issues is not None:
            issues.record(tour, "manifest", MANIFEST_FILENAME, error)
        else:
            LOGGER.warning("Error reading %s: %s", manifest_path, error)
        return TourManifest()
