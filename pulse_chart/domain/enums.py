"""Controlled enumerations for the pulse-chart domain."""

from __future__ import annotations

from enum import Enum


class SchedulerState(str, Enum):
    """Lifecycle states of the refresh scheduler.

    IDLE → RUNNING → STOPPED.  STOPPED is terminal.
    """

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


class LineType(str, Enum):
    """Stroke styles understood by the chart engine."""

    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
