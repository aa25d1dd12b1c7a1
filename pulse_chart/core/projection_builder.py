"""Projection builder — maps a window snapshot to render coordinates.

Pure and total: no state, no I/O, no error conditions for well-formed
input.  An empty window yields a projection with empty arrays.
"""

from __future__ import annotations

from typing import Sequence

from pulse_chart.domain.projection import DEFAULT_STYLE, ChartStyle, Projection
from pulse_chart.domain.sample import Sample


def build_projection(
    samples: Sequence[Sample],
    style: ChartStyle = DEFAULT_STYLE,
) -> Projection:
    """Build a fresh Projection from *samples* without touching them."""
    return Projection(
        x_axis_labels=tuple(s.time for s in samples),
        y_values=tuple(s.status for s in samples),
        style=style,
    )
