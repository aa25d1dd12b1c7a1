"""Projection — the render-ready form of a sample window.

A Projection is a pure value: two coordinate arrays plus a fixed
presentation style.  It holds no reference back to the window it was
built from and is never mutated after creation.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from pulse_chart.domain.enums import LineType


# ── Style ────────────────────────────────────────────────────────────────────

class GradientStop(BaseModel):
    """One colour stop of a linear gradient (offset 0 = top, 1 = bottom)."""

    offset: float = Field(..., ge=0.0, le=1.0)
    color: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class ChartStyle(BaseModel):
    """Presentation parameters for the line chart.

    Constant across ticks.  Nothing here depends on the sample data.
    """

    line_color: str = "#1e90ff"
    smooth: bool = True
    show_symbol: bool = False
    line_width: int = Field(2, ge=1)
    area_opacity: float = Field(0.3, ge=0.0, le=1.0)
    area_gradient: tuple[GradientStop, ...] = (
        GradientStop(offset=0.0, color="#83bff6"),
        GradientStop(offset=1.0, color="#1e90ff"),
    )
    split_line_type: LineType = LineType.DASHED
    x_label_rotate: int = 45
    axis_label_color: str = "#666"
    boundary_gap: bool = False
    grid_top: int = 20
    show_legend: bool = False
    tooltip_trigger: str = "axis"
    tooltip_template: str = "{b0}<br/>Network status: {c0}"

    model_config = {"frozen": True}


DEFAULT_STYLE = ChartStyle()


# ── Projection ───────────────────────────────────────────────────────────────

class Projection(BaseModel):
    """Coordinate arrays for one render pass."""

    x_axis_labels: tuple[str, ...] = ()
    y_values: tuple[float, ...] = ()
    style: ChartStyle = DEFAULT_STYLE

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def arrays_must_align(self) -> Projection:
        if len(self.x_axis_labels) != len(self.y_values):
            raise ValueError(
                f"x_axis_labels ({len(self.x_axis_labels)}) and "
                f"y_values ({len(self.y_values)}) differ in length"
            )
        return self

    @property
    def point_count(self) -> int:
        return len(self.x_axis_labels)

    @property
    def is_empty(self) -> bool:
        return not self.x_axis_labels

    def to_chart_option(self) -> dict[str, Any]:
        """Render as an ECharts-compatible option document (plain JSON)."""
        s = self.style
        return {
            "color": [s.line_color],
            "tooltip": {
                "trigger": s.tooltip_trigger,
                "formatter": s.tooltip_template,
            },
            "xAxis": {
                "type": "category",
                "boundaryGap": s.boundary_gap,
                "data": list(self.x_axis_labels),
                "axisLabel": {"rotate": s.x_label_rotate, "color": s.axis_label_color},
            },
            "yAxis": {
                "type": "value",
                "splitLine": {"lineStyle": {"type": s.split_line_type.value}},
                "axisLabel": {"color": s.axis_label_color},
            },
            "grid": {"top": s.grid_top},
            "series": [
                {
                    "data": list(self.y_values),
                    "type": "line",
                    "smooth": s.smooth,
                    "showSymbol": s.show_symbol,
                    "lineStyle": {"width": s.line_width},
                    "areaStyle": {
                        "opacity": s.area_opacity,
                        "color": {
                            "type": "linear",
                            "x": 0,
                            "y": 0,
                            "x2": 0,
                            "y2": 1,
                            "colorStops": [
                                {"offset": stop.offset, "color": stop.color}
                                for stop in s.area_gradient
                            ],
                        },
                    },
                }
            ],
            "legend": {"show": s.show_legend},
        }
