"""Mini README: Group classified files into scenes.

Structure:
    * SceneSpec - one remote scene to create, with its ordered local files.
    * group_scene_files - merge one folder's files into scene specs.

Every 2d or 360 file becomes its own scene. All sequence frames of a folder
become one scene ordered by trailing frame number, with lexicographic order
on the original name for ties or names without a number.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, List, Optional

from .classifier import ClassifiedFile, SceneType
from .slugs import extract_number, slug_to_name

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..colors import Color


@dataclass(slots=True)
class SceneSpec:
    """In-memory description of a scene before it is uploaded."""

    name: str
    scene_type: SceneType
    files: List[Path] = field(default_factory=list)
    automotive_type: Optional[str] = None
    color: Optional["Color"] = None

    @property
    def color_id(self) -> Optional[str]:
        return self.color.remote_id if self.color else None


def _compare_frames(first: ClassifiedFile, second: ClassifiedFile) -> int:
    first_number = extract_number(first.original_name)
    second_number = extract_number(second.original_name)
    if first_number is not None and second_number is not None and first_number != second_number:
        return first_number - second_number
    if first.original_name == second.original_name:
        return 0
    return -1 if first.original_name < second.original_name else 1


def group_scene_files(files: Iterable[ClassifiedFile], folder_label: str) -> List[SceneSpec]:
    """Build scene specs for one folder; ``folder_label`` names unnamed scenes."""

    scenes: List[SceneSpec] = []
    frames: List[ClassifiedFile] = []
    label = slug_to_name(folder_label)

    for classified in files:
        if classified.scene_type is SceneType.SEQUENCE:
            frames.append(classified)
            continue
        scenes.append(
            SceneSpec(
                name=classified.scene_name or f"{label} {classified.scene_type.value}",
                scene_type=classified.scene_type,
                files=[classified.path],
            )
        )

    if frames:
        frames.sort(key=cmp_to_key(_compare_frames))
        scenes.append(
            SceneSpec(
                name=frames[0].scene_name or f"{label} Sequence",
                scene_type=SceneType.SEQUENCE,
                files=[frame.path for frame in frames],
            )
        )

    return scenes
