"""Registry of the files currently known to the watcher."""

from __future__ import annotations

import threading
from pathlib import Path


class WatchedFileSet:
    """Insertion-ordered set of absolute file paths.

    Mutations and snapshots are serialised by a lock, so a snapshot never
    observes a half-applied add or remove.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: dict[Path, bool] = {}

    def add(self, path: str | Path) -> None:
        key = Path(path).resolve()
        with self._lock:
            self._paths.setdefault(key, True)

    def remove(self, path: str | Path) -> None:
        key = Path(path).resolve()
        with self._lock:
            self._paths.pop(key, None)

    def remove_tree(self, directory: str | Path) -> int:
        """Remove every path under *directory*. Returns how many were removed."""
        root = Path(directory).resolve()
        with self._lock:
            doomed = [p for p in self._paths if p.is_relative_to(root)]
            for path in doomed:
                del self._paths[path]
        return len(doomed)

    def snapshot(self) -> list[Path]:
        """Current paths in the order they were first added."""
        with self._lock:
            return list(self._paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        with self._lock:
            return Path(path).resolve() in self._paths

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)
