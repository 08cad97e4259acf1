"""Build orchestration for one-shot and watch-mode builds."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import BaseModel

from atomsmith.errors import AtomsmithError, GenerationError
from atomsmith.output.writer import OutputWriter, WriteOutcome
from atomsmith.rules.generator import StylesheetGenerator
from atomsmith.rules.models import GeneratorOptions, StaticConfig
from atomsmith.scanner.scanner import CorpusScanner
from atomsmith.tokens import TokenSet
from atomsmith.watch.fileset import WatchedFileSet
from atomsmith.watch.scheduler import BuildScheduler
from atomsmith.watch.watcher import CorpusWatcher

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    """Outcome of one scan + generate + write cycle."""

    number: int
    inputs: int
    tokens: int
    outcome: WriteOutcome
    destination: str | None = None
    duration: float = 0.0


class Orchestrator:
    """Runs builds over the configured inputs and, in watch mode, over the
    live set of watched files.

    In watch mode the orchestrator is the watcher's listener: add and remove
    events update the file set and trigger the scheduler, change events only
    trigger, and ``ready`` fires the first build. Events that arrive before
    ``ready`` only update the file set. Every build scans a snapshot taken
    when it starts, never the set as it was at trigger time.
    """

    def __init__(
        self,
        inputs: Iterable[str | Path],
        *,
        scanner: CorpusScanner,
        generator: StylesheetGenerator,
        writer: OutputWriter,
        static_config: StaticConfig | None = None,
        options: GeneratorOptions | None = None,
        recursive: bool = False,
        class_names: Iterable[str] = (),
        on_build: Callable[[BuildReport], None] | None = None,
    ) -> None:
        self._inputs = [Path(p) for p in inputs]
        self._scanner = scanner
        self._generator = generator
        self._writer = writer
        self._static_config = static_config or StaticConfig()
        self._options = options or GeneratorOptions()
        self._recursive = recursive
        self._class_names = TokenSet(class_names)
        self._on_build = on_build
        self._files = WatchedFileSet()
        self._scheduler = BuildScheduler(self._build_snapshot)
        self._ready = False
        self._builds = 0

    @property
    def files(self) -> WatchedFileSet:
        return self._files

    @property
    def scheduler(self) -> BuildScheduler:
        return self._scheduler

    async def run_once(self) -> BuildReport:
        """Build the configured inputs a single time."""
        return await self._build(self._inputs, recursive=self._recursive)

    async def watch(self, watcher: CorpusWatcher | None = None) -> None:
        """Rebuild on every change until a build fails; the failure is re-raised."""
        if watcher is None:
            ignore, patterns = [], []
            # The output and its temporary files may live inside the corpus
            if self._writer.destination is not None:
                ignore.append(self._writer.destination)
                patterns.append(self._writer.temp_pattern)
            watcher = CorpusWatcher(
                self._inputs,
                recursive=self._recursive,
                ignore=ignore,
                ignore_patterns=patterns,
            )
        watcher.start(self)
        try:
            await self._scheduler.wait_failed()
        finally:
            watcher.stop()

    # -- watcher listener ------------------------------------------------

    def file_added(self, path: Path) -> None:
        self._files.add(path)
        self._trigger()

    def file_removed(self, path: Path) -> None:
        self._files.remove(path)
        self._trigger()

    def file_changed(self, path: Path) -> None:
        self._trigger()

    def tree_removed(self, path: Path) -> None:
        if self._files.remove_tree(path):
            self._trigger()

    def ready(self) -> None:
        if self._ready:
            return
        self._ready = True
        logger.info("Initial scan found %d file(s)", len(self._files))
        self._scheduler.trigger()

    def _trigger(self) -> None:
        if self._ready:
            self._scheduler.trigger()

    # -- builds ----------------------------------------------------------

    async def _build_snapshot(self) -> None:
        await self._build(self._files.snapshot(), recursive=False)

    async def _build(self, inputs: list[Path], recursive: bool) -> BuildReport:
        self._builds += 1
        started = time.monotonic()

        scanned = await asyncio.to_thread(self._scanner.scan, inputs, recursive)
        tokens = self._class_names | scanned
        css = await asyncio.to_thread(self._generate, tokens)
        outcome = await asyncio.to_thread(self._writer.write, css)

        destination = self._writer.destination
        report = BuildReport(
            number=self._builds,
            inputs=len(inputs),
            tokens=len(tokens),
            outcome=outcome,
            destination=str(destination) if destination else None,
            duration=time.monotonic() - started,
        )
        logger.info(
            "Build %d: %d token(s) from %d input(s), %s",
            report.number,
            report.tokens,
            report.inputs,
            report.outcome.value,
        )
        if self._on_build is not None:
            self._on_build(report)
        return report

    def _generate(self, tokens: TokenSet) -> str:
        try:
            return self._generator.generate(tokens, self._static_config, self._options)
        except AtomsmithError:
            raise
        except Exception as e:
            raise GenerationError(None, str(e)) from e
