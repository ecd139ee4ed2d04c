"""Mini README: Polling directory watcher with a debounce window.

Structure:
    * snapshot_tree - ``{relative path: (mtime, size)}`` for non-hidden files.
    * DirectoryWatcher - fires a callback once the tree stops changing.

Every detected change restarts the debounce window, so a burst of copies
triggers a single re-run. The callback always reprocesses everything; the
watcher carries no notion of what changed.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Snapshot = Dict[str, Tuple[float, int]]


def snapshot_tree(root: Path) -> Snapshot:
    """Capture modification time and size of every non-hidden file under ``root``."""

    root = Path(root)
    state: Snapshot = {}
    if not root.is_dir():
        return state
    for path in root.rglob("*"):
        relative = path.relative_to(root)
        if any(part.startswith(".") for part in relative.parts):
            continue
        try:
            if path.is_file():
                stat = path.stat()
                state[relative.as_posix()] = (stat.st_mtime, stat.st_size)
        except OSError:
            # Removed between listing and stat; the next poll will notice.
            continue
    return state


class DirectoryWatcher:
    """Invoke ``on_change`` after ``debounce_seconds`` without further changes."""

    def __init__(
        self,
        root: Path,
        on_change: Callable[[], object],
        *,
        debounce_seconds: float = 2.0,
        poll_interval_seconds: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.root = Path(root)
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self.poll_interval_seconds = poll_interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._last = snapshot_tree(self.root)
        self._pending_since: Optional[float] = None

    def poll(self) -> bool:
        """Check the tree once; return ``True`` when the callback fired."""

        current = snapshot_tree(self.root)
        if current != self._last:
            added = current.keys() - self._last.keys()
            removed = self._last.keys() - current.keys()
            changed = {key for key in current.keys() & self._last.keys() if current[key] != self._last[key]}
            LOGGER.info(
                "Detected changes under %s: %s added, %s changed, %s removed",
                self.root,
                len(added),
                len(changed),
                len(removed),
            )
            self._last = current
            self._pending_since = self._clock()
            return False

        if self._pending_since is not None and self._clock() - self._pending_since >= self.debounce_seconds:
            self._pending_since = None
            LOGGER.info("Changes settled; re-running")
            self.on_change()
            return True
        return False

    def run_forever(self) -> None:  # pragma: no cover - loops until Ctrl-C
        LOGGER.info("Watching %s (Ctrl+C to stop)", self.root)
        try:
            while True:
                self.poll()
                self._sleep(self.poll_interval_seconds)
        except KeyboardInterrupt:
            LOGGER.info("Watch mode stopped")
