"""Mini README: Filesystem helpers shared by the upload and watch paths."""

from .files import list_image_files, list_subfolders
from .watcher import DirectoryWatcher, snapshot_tree

__all__ = ["DirectoryWatcher", "list_image_files", "list_subfolders", "snapshot_tree"]
