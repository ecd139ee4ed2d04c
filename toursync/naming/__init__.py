"""Mini README: Naming conventions shared by upload and download.

Re-exports the slug helpers, the filename classifier and the scene grouper
so callers do not need to know which module holds each piece.
"""

from .classifier import ClassifiedFile, NameClassifier, SceneType
from .grouping import SceneSpec, group_scene_files
from .slugs import IMAGE_EXTENSIONS, extract_number, is_image_file, name_to_slug, slug_to_name

__all__ = [
    "ClassifiedFile",
    "IMAGE_EXTENSIONS",
    "NameClassifier",
    "SceneSpec",
    "SceneType",
    "extract_number",
    "group_scene_files",
    "is_image_file",
    "name_to_slug",
    "slug_to_name",
]
