"""Bounded FIFO window of recent samples.

Design notes:
    - Insertion order is arrival order is chronological order.  Time
      labels are never inspected for ordering.
    - When an append would exceed capacity the oldest samples are evicted
      first.  A capacity of zero keeps the window permanently empty.
    - Malformed samples are rejected before any mutation, so a failed
      append leaves the window exactly as it was.
    - A lock serializes access so a threaded host never observes a
      half-applied append.  Callers only ever receive immutable
      snapshots, never a handle to the underlying deque.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Any, Iterable, Mapping

from pulse_chart.domain.sample import Sample

logger = logging.getLogger(__name__)


class SampleWindow:
    """Fixed-capacity, ordered container of Samples.

    Args:
        capacity: Maximum number of retained samples.  Must be >= 0.
    """

    __slots__ = ("_capacity", "_samples", "_lock", "total_appended", "total_evicted")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._samples: deque[Sample] = deque()
        self._lock = threading.Lock()
        self.total_appended: int = 0
        self.total_evicted: int = 0

    # ── Mutation ─────────────────────────────────────────────────────────

    def append(self, sample: Sample | Mapping[str, Any]) -> Sample:
        """Add *sample* at the tail, evicting from the head past capacity.

        Returns the validated Sample that was appended.

        Raises:
            InvalidSample: If *sample* is malformed.  The window is unchanged.
        """
        validated = Sample.parse(sample)
        with self._lock:
            self._samples.append(validated)
            self.total_appended += 1
            evicted = 0
            while len(self._samples) > self._capacity:
                self._samples.popleft()
                evicted += 1
            self.total_evicted += evicted
        if evicted:
            logger.debug("Evicted %d sample(s) (capacity=%d)", evicted, self._capacity)
        return validated

    def extend(self, samples: Iterable[Sample | Mapping[str, Any]]) -> None:
        """Append each of *samples* in order.  Stops at the first invalid one."""
        for sample in samples:
            self.append(sample)

    # ── Queries ──────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[Sample, ...]:
        """Current samples, oldest first, as an immutable tuple."""
        with self._lock:
            return tuple(self._samples)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)

    def to_dict(self) -> dict:
        return {
            "capacity": self._capacity,
            "size": len(self),
            "total_appended": self.total_appended,
            "total_evicted": self.total_evicted,
        }
