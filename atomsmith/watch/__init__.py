"""Watch mode: the file registry, build scheduling and filesystem events."""

from atomsmith.watch.fileset import WatchedFileSet
from atomsmith.watch.scheduler import BuildScheduler, BuildState
from atomsmith.watch.watcher import CorpusWatcher, WatchListener

__all__ = [
    "BuildScheduler",
    "BuildState",
    "CorpusWatcher",
    "WatchListener",
    "WatchedFileSet",
]
