"""Mini README: Filename classification into scene descriptors.

Structure:
    * SceneType - the three scene flavours understood by the remote service.
    * ClassifiedFile - result of classifying one file.
    * NameClassifier - prefix rules with heuristic fallbacks.

Rules, in order:
    1. ``2d_``, ``360_`` and ``seq_`` prefixes (case-insensitive). For 2d and
       360 a single trailing ``_N`` to ``_NNN`` index is dropped from the name.
    2. Unprefixed names ending in two or more digits, or shaped like
       ``angle_01`` / ``frame3``, are sequence frames.
    3. Unprefixed names mentioning ``pano``, ``panorama``, ``360`` or
       ``equirect`` are 360 panoramas.
    Anything else raises ``ClassificationError``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..errors import ClassificationError, IssueLog
from ..logging_utils import get_logger
from .slugs import slug_to_name

LOGGER = get_logger(__name__)


class SceneType(str, Enum):
    """Scene flavours, valued as the remote service spells them."""

    TWO_D = "2d"
    PANORAMA = "360"
    SEQUENCE = "sequence"

    @property
    def prefix(self) -> str:
        return PREFIXES[self]


PREFIXES = {
    SceneType.TWO_D: "2d_",
    SceneType.PANORAMA: "360_",
    SceneType.SEQUENCE: "seq_",
}

_INDEX_SUFFIX = re.compile(r"_\d{1,3}$")
_FRAME_SUFFIX = re.compile(r"[_-]?\d{2,}$")
_FRAME_WORD = re.compile(r"^(angle|frame|step|image)[_-]?\d+$", re.IGNORECASE)
_ANY_NUMBER_SUFFIX = re.compile(r"[_-]?\d+$")
_PANORAMA_HINT = re.compile(r"pano(cube)?|panorama|360|equirect", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class ClassifiedFile:
    """A file together with the scene it belongs to."""

    path: Path
    scene_type: SceneType
    scene_name: str
    original_name: str
    prefix: Optional[str] = None
    auto_detected: bool = False


class NameClassifier:
    """Map filenames onto ``(scene type, scene name)`` pairs."""

    def classify(self, filename: Union[str, Path]) -> ClassifiedFile:
        """Classify a single file or raise ``ClassificationError``."""

        path = Path(filename)
        base_name = path.stem
        lowered = base_name.lower()

        for scene_type, prefix in PREFIXES.items():
            if lowered.startswith(prefix):
                remainder = base_name[len(prefix):]
                if scene_type is not SceneType.SEQUENCE:
                    remainder = _INDEX_SUFFIX.sub("", remainder)
                return ClassifiedFile(
                    path=path,
                    scene_type=scene_type,
                    scene_name=slug_to_name(remainder),
                    original_name=base_name,
                    prefix=prefix,
                )

        if _FRAME_SUFFIX.search(base_name) or _FRAME_WORD.match(base_name):
            return ClassifiedFile(
                path=path,
                scene_type=SceneType.SEQUENCE,
                scene_name=slug_to_name(_ANY_NUMBER_SUFFIX.sub("", base_name)),
                original_name=base_name,
                auto_detected=True,
            )

        if _PANORAMA_HINT.search(base_name):
            return ClassifiedFile(
                path=path,
                scene_type=SceneType.PANORAMA,
                scene_name=slug_to_name(base_name),
                original_name=base_name,
                auto_detected=True,
            )

        raise ClassificationError(
            f"File '{path.name}' has no valid prefix (2d_, 360_, seq_)"
        )

    def classify_folder(
        self,
        paths: Iterable[Path],
        *,
        issues: Optional[IssueLog] = None,
        tour: str = "",
    ) -> Tuple[List[ClassifiedFile], List[Path]]:
        """Classify many files, returning ``(classified, rejected)``.

        Rejected files are recorded in ``issues`` when a collector is given.
        """

        classified: List[ClassifiedFile] = []
        rejected: List[Path] = []
        for path in paths:
            try:
                classified.append(self.classify(path))
            except ClassificationError as error:
                rejected.append(path)
                if issues is not None:
                    issues.record(tour, "file", str(path), error)
                else:
                    LOGGER.debug("Dropping %s: %s", path, error)
        return classified, rejected
