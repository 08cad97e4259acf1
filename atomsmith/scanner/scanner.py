"""Depth-first corpus traversal and order-stable token aggregation."""

from __future__ import annotations

import logging
import stat
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from atomsmith.errors import ScanError
from atomsmith.scanner.exclusion import is_excluded
from atomsmith.tokens import TokenSet

logger = logging.getLogger(__name__)

Extractor = Callable[[str], Iterable[str]]


def iter_corpus_files(
    inputs: Iterable[str | Path],
    recursive: bool = False,
    base_dir: Path | None = None,
) -> Iterator[Path]:
    """Yield every file reachable from *inputs*, depth first, in input order.

    A directory named directly in *inputs* (``base_dir`` is None) is always
    listed; nested directories are only entered when *recursive* is set.
    Entries are visited in name order. Missing paths and unlistable
    directories raise ScanError.
    """
    root = base_dir if base_dir is not None else Path.cwd()
    for item in inputs:
        path = (root / item).resolve()
        try:
            mode = path.stat().st_mode
        except OSError as e:
            raise ScanError(path, e) from e

        if stat.S_ISREG(mode):
            yield path
            continue
        if not stat.S_ISDIR(mode):
            raise ScanError(path, ValueError("not a regular file or directory"))

        if base_dir is not None and not recursive:
            logger.debug("Not descending into %s", path)
            continue

        try:
            names = sorted(entry.name for entry in path.iterdir())
        except OSError as e:
            raise ScanError(path, e) from e
        yield from iter_corpus_files(names, recursive=recursive, base_dir=path)


class CorpusScanner:
    """Collects tokens from a corpus of files with a fixed exclusion set.

    The extractor is called once per included file with the file's full
    text. Excluded files contribute nothing; each exclusion is logged and
    passed to the optional ``on_excluded`` callback.
    """

    def __init__(
        self,
        extractor: Extractor,
        exclude: Iterable[str] = (),
        on_excluded: Callable[[Path], None] | None = None,
    ) -> None:
        self._extractor = extractor
        self._exclude = tuple(exclude)
        self._on_excluded = on_excluded

    @property
    def exclude(self) -> tuple[str, ...]:
        return self._exclude

    def scan(
        self,
        inputs: Iterable[str | Path],
        recursive: bool = False,
        base_dir: Path | None = None,
    ) -> TokenSet:
        tokens = TokenSet()
        for path in iter_corpus_files(inputs, recursive=recursive, base_dir=base_dir):
            tokens.update(self.scan_file(path))
        return tokens

    def scan_file(self, path: Path) -> TokenSet:
        """Extract the tokens of a single file, honouring exclusions."""
        if is_excluded(path, self._exclude):
            logger.info("Excluded %s", path)
            if self._on_excluded is not None:
                self._on_excluded(path)
            return TokenSet()

        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ScanError(path, e) from e

        try:
            found = TokenSet(self._extractor(content))
        except Exception as e:
            raise ScanError(path, e) from e

        logger.debug("Found %d token(s) in %s", len(found), path)
        return found
