"""SyntheticProducer — simulated network-status readings.

Each sample is stamped with the current local clock time and carries a
status drawn uniformly from ``[base, base + spread)``.  With the defaults
that is ``[50, 52)``.
"""

from __future__ import annotations

import random
from typing import Callable

from pulse_chart.domain.sample import Sample
from pulse_chart.foundation.clock import clock_label
from pulse_chart.producers.base import SampleProducer


class SyntheticProducer(SampleProducer):
    """Generates random samples around a fixed baseline.

    Args:
        base: Lower bound of the generated status.
        spread: Width of the uniform distribution above *base*.
        rng: Random source; pass a seeded ``random.Random`` for determinism.
        label: Callable returning the time label for a new sample.
    """

    def __init__(
        self,
        base: float = 50.0,
        spread: float = 2.0,
        rng: random.Random | None = None,
        label: Callable[[], str] = clock_label,
    ) -> None:
        if spread < 0:
            raise ValueError("spread must be non-negative")
        self._base = base
        self._spread = spread
        self._rng = rng or random.Random()
        self._label = label

    @property
    def name(self) -> str:
        return "synthetic"

    async def next(self) -> Sample:
        return Sample(
            time=self._label(),
            status=self._rng.random() * self._spread + self._base,
        )
