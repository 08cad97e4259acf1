"""Glob-based exclusion of corpus files."""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable
from pathlib import Path


def is_excluded(path: str | Path, patterns: Iterable[str]) -> bool:
    """Return True if *path* matches any of *patterns*.

    Patterns without a ``/`` are matched against the file name, so
    ``*.min.js`` excludes minified files at any depth. Patterns containing a
    ``/`` are matched against the absolute POSIX path.
    """
    absolute = Path(path).resolve()
    basename = absolute.name
    full = absolute.as_posix()
    for pattern in patterns:
        target = full if "/" in pattern else basename
        if fnmatch.fnmatch(target, pattern):
            return True
    return False
