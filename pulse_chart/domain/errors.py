"""Error taxonomy for the pulse-chart pipeline.

None of these are fatal to the process.  The scheduler catches every one
of them at the tick boundary, logs it, and keeps running.
"""

from __future__ import annotations


class PulseChartError(Exception):
    """Base class for all pulse-chart errors."""


class InvalidSample(PulseChartError, ValueError):
    """Raised when a sample is malformed and rejected at the window boundary."""

    def __init__(self, reason: str, raw: object = None) -> None:
        self.reason = reason
        self.raw = raw
        super().__init__(f"Invalid sample: {reason}")


class ProducerUnavailable(PulseChartError):
    """Raised when a sample producer cannot deliver a sample right now.

    Transient: the scheduler skips the tick and retries on the next one.
    """

    def __init__(self, producer_name: str, reason: str) -> None:
        self.producer_name = producer_name
        self.reason = reason
        super().__init__(f"Producer '{producer_name}' unavailable: {reason}")


class SinkUnavailable(PulseChartError):
    """Raised when the render target has been torn down."""


class SchedulerStateError(PulseChartError, RuntimeError):
    """Raised on an illegal scheduler lifecycle transition."""


class UnknownProducerError(PulseChartError, LookupError):
    """Raised when no producer factory is registered under a name."""
