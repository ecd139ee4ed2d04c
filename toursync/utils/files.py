"""Mini README: Directory listing helpers with deterministic ordering."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..naming.slugs import is_image_file


def list_image_files(directory: Path) -> List[Path]:
    """Return supported image files directly inside ``directory``, sorted by name.

    A missing directory yields an empty list.
    """

    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        (entry for entry in directory.iterdir() if entry.is_file() and is_image_file(entry.name)),
        key=lambda entry: entry.name,
    )


def list_subfolders(directory: Path) -> List[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        (entry for entry in directory.iterdir() if entry.is_dir() and not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )
