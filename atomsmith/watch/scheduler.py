"""Single-flight build scheduling with one coalesced follow-up build."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class BuildState(str, enum.Enum):
    IDLE = "idle"
    BUILDING = "building"
    BUILDING_WITH_QUEUED = "building_with_queued"
    FAILED = "failed"

    @property
    def building(self) -> bool:
        return self in (BuildState.BUILDING, BuildState.BUILDING_WITH_QUEUED)

    @property
    def queued(self) -> bool:
        return self is BuildState.BUILDING_WITH_QUEUED


class BuildScheduler:
    """Runs at most one build at a time and never drops a trigger.

    A trigger while idle starts a build. Triggers while a build is in flight
    collapse into a single queued follow-up, which starts as soon as the
    current build succeeds. A failed build is terminal: the scheduler stops
    accepting triggers and the error is re-raised from ``wait_idle`` and
    ``wait_failed``.

    ``trigger`` must be called from the event loop thread. It never awaits,
    so a transition cannot interleave with another event.
    """

    def __init__(self, build: Callable[[], Awaitable[object]]) -> None:
        self._build = build
        self._state = BuildState.IDLE
        self._task: asyncio.Task[None] | None = None
        self._error: Exception | None = None
        self._settled = asyncio.Event()
        self._settled.set()
        self._failed = asyncio.Event()
        self.builds_started = 0

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def building(self) -> bool:
        return self._state.building

    @property
    def queued(self) -> bool:
        return self._state.queued

    @property
    def error(self) -> Exception | None:
        return self._error

    def trigger(self) -> None:
        if self._state is BuildState.FAILED:
            logger.debug("Ignoring trigger: a previous build failed")
        elif self._state is BuildState.IDLE:
            self._start()
        elif self._state is BuildState.BUILDING:
            self._state = BuildState.BUILDING_WITH_QUEUED
            logger.debug("Build %d in flight, queued a rebuild", self.builds_started)
        else:
            logger.debug("Rebuild already queued, trigger absorbed")

    async def wait_idle(self) -> None:
        """Wait until no build is running or queued; re-raise a build failure."""
        await self._settled.wait()
        if self._error is not None:
            raise self._error

    async def wait_failed(self) -> None:
        """Wait for a build to fail and re-raise its error."""
        await self._failed.wait()
        assert self._error is not None
        raise self._error

    def _start(self) -> None:
        self._state = BuildState.BUILDING
        self._settled.clear()
        self.builds_started += 1
        logger.debug("Starting build %d", self.builds_started)
        self._task = asyncio.get_running_loop().create_task(self._run(self.builds_started))

    async def _run(self, number: int) -> None:
        try:
            await self._build()
        except Exception as exc:
            logger.error("Build %d failed: %s", number, exc)
            self._error = exc
            self._state = BuildState.FAILED
            self._failed.set()
            self._settled.set()
            return

        if self._state is BuildState.BUILDING_WITH_QUEUED:
            self._start()
        else:
            self._state = BuildState.IDLE
            self._settled.set()
            logger.debug("Build %d finished, idle", number)
