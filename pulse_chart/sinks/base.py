"""Abstract base for render sinks.

A render sink is whatever actually paints the chart.  The scheduler
only ever calls the three methods below and never assumes anything
about the surface behind them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pulse_chart.domain.projection import Projection


class RenderSink(ABC):
    """Consumer of projections."""

    @abstractmethod
    async def apply_projection(self, projection: Projection) -> None:
        """Replace whatever is drawn with *projection*.

        Raises:
            SinkUnavailable: If the surface disappeared mid-apply.
        """
        ...

    @abstractmethod
    async def resize(self) -> None:
        """Refit the surface to its container.  Called after every apply."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """False once the surface has been torn down."""
        ...
