"""Sample — the atomic telemetry reading.

A Sample pairs a clock-time display label with a scalar health metric
(latency, signal score, ...).  The label is for display only; ordering
is positional and comes from arrival order in the window.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from pulse_chart.domain.errors import InvalidSample


class Sample(BaseModel):
    """One (time label, status) reading.  Immutable after creation."""

    time: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Human-readable clock label, e.g. 14:03:27",
    )
    status: float = Field(
        ...,
        allow_inf_nan=False,
        description="Metric value (signal score, latency, ...)",
    )

    model_config = {"frozen": True}

    @field_validator("status", mode="before")
    @classmethod
    def status_must_be_numeric(cls, v: Any) -> Any:
        # Lax float mode would coerce True and "50"
        if isinstance(v, (bool, str, bytes)):
            raise ValueError(f"status must be a number, got {type(v).__name__}")
        return v

    @field_validator("time")
    @classmethod
    def time_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("time label must not be blank")
        return v

    @classmethod
    def parse(cls, raw: Sample | Mapping[str, Any]) -> Sample:
        """Return a validated Sample for *raw* or raise InvalidSample.

        Existing Sample instances are re-checked because
        ``model_construct`` can produce one without validation.
        """
        if isinstance(raw, Sample):
            if not isinstance(raw.time, str) or not raw.time.strip():
                raise InvalidSample("missing time label", raw)
            status = raw.status
            if isinstance(status, bool) or not isinstance(status, (int, float)):
                raise InvalidSample(f"non-numeric status {status!r}", raw)
            if not math.isfinite(status):
                raise InvalidSample(f"non-finite status {status!r}", raw)
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            reasons = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'sample'}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidSample(reasons, raw) from exc

    def __str__(self) -> str:
        return f"{self.time}={self.status:g}"
