"""watchdog-backed watcher that reports corpus file events to the event loop."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Protocol

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from atomsmith.errors import ScanError
from atomsmith.scanner.exclusion import is_excluded
from atomsmith.scanner.scanner import iter_corpus_files

logger = logging.getLogger(__name__)


class WatchListener(Protocol):
    """Receives watcher events on the event loop thread, in arrival order."""

    def file_added(self, path: Path) -> None: ...

    def file_removed(self, path: Path) -> None: ...

    def file_changed(self, path: Path) -> None: ...

    def tree_removed(self, path: Path) -> None: ...

    def ready(self) -> None: ...


def _event_path(raw: str | bytes) -> Path:
    return Path(os.fsdecode(raw)).resolve()


class _CorpusEventHandler(FileSystemEventHandler):
    """Translates watchdog events into listener calls.

    Only create, delete, move and modify are forwarded. Open and close
    events are dropped so the scanner's own reads never look like changes.
    """

    def __init__(
        self,
        accepts: Callable[[Path], bool],
        emit: Callable[[str, Path], None],
        recursive: bool = False,
    ) -> None:
        super().__init__()
        self._accepts = accepts
        self._emit = emit
        self._recursive = recursive

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._forward("added", _event_path(event.src_path))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._forward("changed", _event_path(event.src_path))

    def on_deleted(self, event: FileSystemEvent) -> None:
        path = _event_path(event.src_path)
        if event.is_directory:
            self._emit("tree_removed", path)
        else:
            self._forward("removed", path)

    def on_moved(self, event: FileSystemEvent) -> None:
        src = _event_path(event.src_path)
        dest = _event_path(event.dest_path)
        if not event.is_directory:
            self._forward("removed", src)
            self._forward("added", dest)
            return

        self._emit("tree_removed", src)
        # Without recursion nothing below a moved-in directory is part of the corpus
        if not self._recursive:
            return
        try:
            moved_in = list(iter_corpus_files([dest], recursive=True))
        except ScanError as e:
            logger.error("Could not list moved directory %s: %s", dest, e)
            # Still trigger so the failure never goes unnoticed by the listener
            self._forward("changed", dest)
            return
        for path in moved_in:
            self._forward("added", path)

    def _forward(self, kind: str, path: Path) -> None:
        if self._accepts(path):
            self._emit(kind, path)


class CorpusWatcher:
    """Watches the corpus inputs and reports file events to a listener.

    File inputs are watched through their parent directory and filtered to
    the exact file; directory inputs are watched recursively only when
    ``recursive`` is set, matching what the scanner would traverse. Paths
    in ``ignore`` (typically the output file) and paths matching
    ``ignore_patterns`` (such as the writer's temporary files) never
    produce events.

    ``start`` starts the observer, lists the initial files, reports each as
    added, then reports ``ready`` exactly once. Later events are marshalled
    onto the event loop with ``call_soon_threadsafe`` so the listener only
    ever runs there.
    """

    def __init__(
        self,
        inputs: Iterable[str | Path],
        recursive: bool = False,
        ignore: Iterable[str | Path] = (),
        base_dir: Path | None = None,
        ignore_patterns: Iterable[str] = (),
    ) -> None:
        root = base_dir if base_dir is not None else Path.cwd()
        self._inputs = [(root / item).resolve() for item in inputs]
        self._recursive = recursive
        self._ignore = {Path(p).resolve() for p in ignore}
        self._ignore_patterns = tuple(ignore_patterns)
        self._files: set[Path] = set()
        self._dirs: dict[Path, bool] = {}
        self._observer: Observer | None = None

    @property
    def running(self) -> bool:
        return self._observer is not None

    def accepts(self, path: Path) -> bool:
        """Return True if *path* is part of the watched corpus."""
        if self._ignored(path):
            return False
        if path in self._files:
            return True
        for directory, recursive in self._dirs.items():
            if path.parent == directory:
                return True
            if recursive and path.is_relative_to(directory):
                return True
        return False

    def start(
        self,
        listener: WatchListener,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Begin watching. Must be called from the loop that owns *listener*."""
        if self._observer is not None:
            return
        loop = loop or asyncio.get_running_loop()

        for path in self._inputs:
            try:
                mode = path.stat().st_mode
            except OSError as e:
                raise ScanError(path, e) from e
            if stat.S_ISDIR(mode):
                self._dirs[path] = self._recursive
            else:
                self._files.add(path)

        def emit(kind: str, path: Path) -> None:
            if loop.is_closed():
                return
            loop.call_soon_threadsafe(_dispatch, listener, kind, path)

        handler = _CorpusEventHandler(self.accepts, emit, recursive=self._recursive)
        observer = Observer()
        for directory, recursive in self._watch_targets().items():
            observer.schedule(handler, str(directory), recursive=recursive)
        observer.start()
        self._observer = observer
        logger.info("Watching %d input(s) for changes", len(self._inputs))

        # Listed only once the observer runs, so a file created meanwhile
        # shows up in the listing, as an event, or both
        try:
            initial = list(iter_corpus_files(self._inputs, recursive=self._recursive))
        except ScanError:
            self.stop()
            raise

        for path in initial:
            if not self._ignored(path):
                listener.file_added(path)
        listener.ready()

    def stop(self) -> None:
        """Stop watching and clean up."""
        if self._observer is None:
            return
        self._observer.stop()
        self._observer.join(timeout=5)
        self._observer = None
        logger.info("Stopped watching")

    def _ignored(self, path: Path) -> bool:
        return path in self._ignore or is_excluded(path, self._ignore_patterns)

    def _watch_targets(self) -> dict[Path, bool]:
        targets: dict[Path, bool] = {}
        for directory, recursive in self._dirs.items():
            targets[directory] = targets.get(directory, False) or recursive
        for path in self._files:
            targets.setdefault(path.parent, False)
        return targets


def _dispatch(listener: WatchListener, kind: str, path: Path) -> None:
    if kind == "added":
        listener.file_added(path)
    elif kind == "removed":
        listener.file_removed(path)
    elif kind == "changed":
        listener.file_changed(path)
    elif kind == "tree_removed":
        listener.tree_removed(path)
