"""pulse-chart — live telemetry window and chart projection service.

This is the application entry point.  It wires the producer, the
refresh scheduler and the dashboard sink together, and ties the
scheduler lifecycle to the FastAPI lifespan.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from pulse_chart.api.chart import create_chart_router
from pulse_chart.config import Settings, settings
from pulse_chart.core.scheduler import RefreshScheduler
from pulse_chart.producers.base import SampleProducer
from pulse_chart.producers.registry import default_registry
from pulse_chart.sinks.dashboard import DashboardSink

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

logger = logging.getLogger(__name__)


def build_producer(cfg: Settings) -> SampleProducer:
    """Instantiate the configured producer."""
    registry = default_registry()
    if cfg.producer == "synthetic":
        return registry.create(
            "synthetic", base=cfg.synthetic_base, spread=cfg.synthetic_spread
        )
    if cfg.producer == "replay":
        # Loops the seed samples, handy for demos without a live source
        if not cfg.initial_samples:
            logger.warning(
                "Replay producer configured without PULSE_INITIAL_SAMPLES; chart will stay empty"
            )
        return registry.create(
            "replay", items=cfg.initial_samples, loop=bool(cfg.initial_samples)
        )
    return registry.create(cfg.producer)


def create_app(
    cfg: Settings = settings,
    producer: SampleProducer | None = None,
) -> FastAPI:
    """Build the FastAPI app.  *producer* overrides the configured one."""

    sink = DashboardSink()
    scheduler = RefreshScheduler(
        producer=producer or build_producer(cfg),
        sink=sink,
        capacity=cfg.window_capacity,
        interval=cfg.refresh_interval_seconds,
        producer_timeout=cfg.producer_timeout_seconds,
    )

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        await scheduler.start(cfg.initial_samples)
        try:
            yield
        finally:
            await scheduler.teardown()
            await sink.close()

    app = FastAPI(
        title=cfg.app_name,
        description="Rolling telemetry window with live chart projections",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.scheduler = scheduler
    app.state.sink = sink

    app.include_router(create_chart_router(scheduler, sink))

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "scheduler": scheduler.state.value,
            "producer": scheduler.producer_name,
            "interval_seconds": scheduler.interval,
            "window": scheduler.window_info(),
            "stats": scheduler.stats.to_dict(),
            "chart_clients": sink.client_count,
        }

    return app


app = create_app()
