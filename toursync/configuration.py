"""Mini README: Centralised configuration models and helpers for toursync.

Structure:
    * TourType - enumeration of supported tour flavours.
    * TourSyncSettings - Pydantic settings read from ``TOURSYNC_*`` variables.
    * RunConfig - immutable snapshot handed to the orchestrator and downloader.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The CLI reads ``get_settings()`` once, applies command line overrides via
    ``to_run_config`` and passes the resulting ``RunConfig`` down. No other
    module reads the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .errors import FatalError


class TourType(str, Enum):
    """Supported tour flavours."""

    AUTOMOTIVE = "automotive"
    SPACES = "spaces"

    @classmethod
    def from_str(cls, value: str) -> "TourType":
        """Coerce arbitrary casing (``Spaces``, ``automotive``) into a tour type."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported tour type: {value}") from error

    @property
    def event_type(self) -> str:
        """Label used by the remote service for this tour type."""

        return "Spaces" if self is TourType.SPACES else "Automotive"


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable runtime options for one bulk or download run."""

    domain: str
    api_key: str
    source_root: Path
    tour_name: Optional[str] = None
    tour_type: TourType = TourType.AUTOMOTIVE
    color_pause_seconds: float = 0.1
    item_pause_seconds: float = 0.2
    request_timeout_seconds: float = 60.0
    media_timeout_seconds: float = 300.0


class TourSyncSettings(BaseSettings):
    """Environment driven configuration for toursync."""

    domain: Optional[str] = Field(
        None,
        description="Domain of the remote tour service, with or without scheme.",
    )
    api_key: Optional[str] = Field(
        None,
        description="API key sent as a bearer token on every request.",
    )
    virtual_tours_path: Path = Field(
        Path("virtualTours"),
        description="Folder whose sub-folders are the tours to upload.",
    )
    tour_name: Optional[str] = Field(
        None,
        description="Process only the tour folder with this exact name.",
    )
    tour_type: TourType = Field(
        TourType.AUTOMOTIVE,
        description="Default tour type; a tour's _config.json eventType wins.",
    )
    color_pause_seconds: float = Field(0.1, ge=0.0)
    item_pause_seconds: float = Field(0.2, ge=0.0)
    request_timeout_seconds: float = Field(60.0, gt=0.0)
    media_timeout_seconds: float = Field(300.0, gt=0.0)
    log_level: str = Field("INFO", description="Root logging level.")

    class Config:
        env_prefix = "TOURSYNC_"
        env_file = ".env"
        case_sensitive = False

    @validator("virtual_tours_path", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Expand user directories; existence is checked when a run starts."""

        return Path(value or "virtualTours").expanduser()

    @validator("tour_type", pre=True)
    def _coerce_tour_type(cls, value: object) -> TourType:
        if isinstance(value, TourType):
            return value
        return TourType.from_str(str(value))

    def to_run_config(self, **overrides: object) -> RunConfig:
        """Freeze settings plus non-empty overrides into a ``RunConfig``."""

        values = {
            "domain": self.domain,
            "api_key": self.api_key,
            "source_root": self.virtual_tours_path,
            "tour_name": self.tour_name,
            "tour_type": self.tour_type,
            "color_pause_seconds": self.color_pause_seconds,
            "item_pause_seconds": self.item_pause_seconds,
            "request_timeout_seconds": self.request_timeout_seconds,
            "media_timeout_seconds": self.media_timeout_seconds,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        missing = [key for key in ("domain", "api_key") if not values[key]]
        if missing:
            raise FatalError(f"Missing required configuration: {', '.join(missing)}")

        if not isinstance(values["tour_type"], TourType):
            values["tour_type"] = TourType.from_str(str(values["tour_type"]))
        values["source_root"] = Path(values["source_root"]).expanduser()
        return RunConfig(**values)  # type: ignore[arg-type]


@lru_cache()
def get_settings() -> TourSyncSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return TourSyncSettings()
