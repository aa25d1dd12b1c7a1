from pulse_chart.core.projection_builder import build_projection
from pulse_chart.core.scheduler import RefreshScheduler
from pulse_chart.domain.projection import ChartStyle, Projection
from pulse_chart.domain.sample import Sample
from pulse_chart.store.window import SampleWindow

__all__ = [
    "build_projection",
    "RefreshScheduler",
    "ChartStyle",
    "Projection",
    "Sample",
    "SampleWindow",
]
