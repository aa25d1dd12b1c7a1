"""Refresh scheduler — drives the tick loop from producer to render sink.

Lifecycle:  IDLE → RUNNING → STOPPED
    - IDLE:    constructed, nothing armed
    - RUNNING: the refresh task is ticking every ``interval`` seconds
    - STOPPED: task cancelled; terminal, a new scheduler is needed

One tick:
    producer.next() → window.append() → build_projection(snapshot)
    → sink.apply_projection() → sink.resize()

Cadence is wait-for-completion: the loop awaits each tick before
sleeping again, so ticks never overlap and a slow sink stretches the
interval instead of queueing work behind it.

No error inside a tick escapes the loop.  The worst case is a stalled
chart, never a dead scheduler.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any, Iterable, Mapping

from pulse_chart.core.projection_builder import build_projection
from pulse_chart.domain.enums import SchedulerState
from pulse_chart.domain.errors import (
    InvalidSample,
    ProducerUnavailable,
    SchedulerStateError,
    SinkUnavailable,
)
from pulse_chart.domain.projection import DEFAULT_STYLE, ChartStyle, Projection
from pulse_chart.domain.sample import Sample
from pulse_chart.producers.base import SampleProducer
from pulse_chart.sinks.base import RenderSink
from pulse_chart.store.window import SampleWindow

logger = logging.getLogger(__name__)


class SchedulerStats:
    """Tick outcome counters for observability."""

    __slots__ = (
        "ticks",
        "emitted",
        "producer_failures",
        "rejected_samples",
        "sink_unavailable",
        "errors",
    )

    def __init__(self) -> None:
        self.ticks: int = 0
        self.emitted: int = 0
        self.producer_failures: int = 0
        self.rejected_samples: int = 0
        self.sink_unavailable: int = 0
        self.errors: int = 0

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in self.__slots__}


class RefreshScheduler:
    """Owns the sample window and the producer, and feeds the render sink.

    Args:
        producer: Source of new samples, called once per tick.
        sink: Render target for every projection.
        capacity: Window size in samples.
        interval: Seconds between the end of one tick and the next.
        producer_timeout: Upper bound in seconds on producer.next();
             None waits indefinitely.
        style: Presentation parameters stamped on every projection.
    """

    def __init__(
        self,
        producer: SampleProducer,
        sink: RenderSink,
        capacity: int = 15,
        interval: float = 2.0,
        producer_timeout: float | None = None,
        style: ChartStyle = DEFAULT_STYLE,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        if producer_timeout is not None and producer_timeout <= 0:
            raise ValueError("producer_timeout must be positive")

        self._producer = producer
        self._sink = sink
        self._window = SampleWindow(capacity)
        self._interval = interval
        self._producer_timeout = producer_timeout
        self._style = style
        self._state = SchedulerState.IDLE
        self._task: asyncio.Task | None = None
        self._tick_lock = asyncio.Lock()
        self._tick_owner: asyncio.Task | None = None
        self._latest: Projection | None = None
        self._torn_down = False
        self.stats = SchedulerStats()

    # ── Lifecycle ────────────────────────────────────────────────────────

    async def start(self, initial_samples: Iterable[Sample | Mapping[str, Any]] = ()) -> None:
        """Seed the window, emit the first projection and arm the loop.

        Malformed initial samples are logged and dropped.

        Raises:
            SchedulerStateError: If the scheduler is not IDLE.
        """
        if self._state is not SchedulerState.IDLE:
            raise SchedulerStateError(
                f"cannot start a scheduler in state '{self._state.value}'"
            )

        for raw in initial_samples:
            try:
                self._window.append(raw)
            except InvalidSample as exc:
                self.stats.rejected_samples += 1
                logger.warning("Dropped initial sample: %s", exc)

        self._state = SchedulerState.RUNNING
        try:
            await self._emit(self._project())
        except Exception as exc:
            self.stats.errors += 1
            logger.error("Initial projection failed: %s", exc, exc_info=True)

        if self._state is SchedulerState.RUNNING:
            self._task = asyncio.create_task(self._run(), name="pulse-chart-refresh")
            logger.info(
                "Refresh scheduler running (producer=%s, interval=%.2fs, capacity=%d, seeded=%d)",
                self._producer.name,
                self._interval,
                self._window.capacity,
                len(self._window),
            )

    async def stop(self) -> None:
        """Cancel the loop and move to STOPPED.  Safe to call repeatedly.

        Waits for a tick already running in another task to finish.  Once
        this returns no tick will reach the sink again.
        """
        if self._state is SchedulerState.STOPPED:
            return

        previous = self._state
        self._state = SchedulerState.STOPPED
        task, self._task = self._task, None

        if task is not None and not task.done():
            task.cancel()
            if task is not asyncio.current_task():
                with contextlib.suppress(asyncio.CancelledError):
                    await task

        # Let a tick started by another caller finish; it sees STOPPED and
        # skips the sink from here on.
        if self._tick_lock.locked() and self._tick_owner is not asyncio.current_task():
            async with self._tick_lock:
                pass

        logger.info("Refresh scheduler stopped (was %s)", previous.value)

    async def teardown(self) -> None:
        """Host unmount hook.  Expected once; extra calls are harmless."""
        if self._torn_down:
            logger.warning("teardown() called more than once")
        self._torn_down = True
        await self.stop()

    # ── Tick ─────────────────────────────────────────────────────────────

    async def tick(self) -> Projection | None:
        """Run one refresh cycle.

        Returns the emitted projection, or None if the tick was skipped.
        Only one tick runs at a time.
        """
        if self._state is not SchedulerState.RUNNING:
            return None

        async with self._tick_lock:
            self._tick_owner = asyncio.current_task()
            self.stats.ticks += 1
            try:
                sample = await self._next_sample()
                if self._state is not SchedulerState.RUNNING:
                    return None
                self._window.append(sample)
                projection = self._project()
                if await self._emit(projection):
                    return projection
            except ProducerUnavailable as exc:
                self.stats.producer_failures += 1
                logger.warning("Skipping tick: %s", exc)
            except InvalidSample as exc:
                self.stats.rejected_samples += 1
                logger.warning("Dropped sample from %s: %s", self._producer.name, exc)
            except Exception as exc:
                self.stats.errors += 1
                logger.error("Tick failed: %s", exc, exc_info=True)
            finally:
                self._tick_owner = None
            return None

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def latest_projection(self) -> Projection | None:
        """The most recently built projection, whether or not it was drawn."""
        return self._latest

    @property
    def producer_name(self) -> str:
        return self._producer.name

    def snapshot(self) -> tuple[Sample, ...]:
        return self._window.snapshot()

    def window_info(self) -> dict:
        return self._window.to_dict()

    # ── Internals ────────────────────────────────────────────────────────

    async def _run(self) -> None:
        try:
            while self._state is SchedulerState.RUNNING:
                await asyncio.sleep(self._interval)
                await self.tick()
        except asyncio.CancelledError:
            logger.debug("Refresh loop cancelled")
            raise

    async def _next_sample(self) -> Sample:
        if self._producer_timeout is None:
            return await self._producer.next()
        try:
            return await asyncio.wait_for(self._producer.next(), self._producer_timeout)
        except asyncio.TimeoutError as exc:
            raise ProducerUnavailable(
                self._producer.name,
                f"timed out after {self._producer_timeout:.2f}s",
            ) from exc

    def _project(self) -> Projection:
        self._latest = build_projection(self._window.snapshot(), self._style)
        return self._latest

    async def _emit(self, projection: Projection) -> bool:
        """Push *projection* to the sink.  Returns True if it was applied."""
        if self._state is not SchedulerState.RUNNING:
            return False
        if not self._sink.is_available():
            self.stats.sink_unavailable += 1
            logger.debug("Render sink unavailable, dropping projection")
            return False
        try:
            await self._sink.apply_projection(projection)
            if self._state is not SchedulerState.RUNNING:
                return False
            await self._sink.resize()
        except SinkUnavailable as exc:
            self.stats.sink_unavailable += 1
            logger.debug("Render sink went away mid-apply: %s", exc)
            return False
        self.stats.emitted += 1
        return True
