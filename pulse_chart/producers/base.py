"""Abstract base for sample producers.

A producer is the periodic source of new Samples.  The scheduler calls
next() once per tick and knows nothing else about where data comes from.

Architectural rules:
    1. next() must return a valid Sample or raise ProducerUnavailable.
    2. next() may suspend while acquiring data but must not block the
       event loop.
    3. No producer may touch the window or the render sink directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pulse_chart.domain.sample import Sample


class SampleProducer(ABC):
    """Base class for sources of telemetry samples."""

    @abstractmethod
    async def next(self) -> Sample:
        """Produce the next Sample.

        Raises:
            ProducerUnavailable: If no sample can be delivered right now.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this producer."""
        ...
