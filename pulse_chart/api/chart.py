"""Chart endpoints — read access to the live window and its projection.

Paths:
    GET /api/projection   latest projection as a chart option document
    GET /api/window       samples currently held in the window
    WS  /ws/chart         live projection pushes

Nothing here mutates the window.  The scheduler is the only writer.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from pulse_chart.core.scheduler import RefreshScheduler
from pulse_chart.sinks.dashboard import DashboardSink, projection_message

logger = logging.getLogger(__name__)


def create_chart_router(scheduler: RefreshScheduler, sink: DashboardSink) -> APIRouter:
    """Factory that wires the chart endpoints to a scheduler and its sink."""

    router = APIRouter()

    @router.get("/api/projection", tags=["chart"])
    async def latest_projection() -> dict[str, Any]:
        projection = scheduler.latest_projection
        if projection is None:
            raise HTTPException(status_code=404, detail="No projection built yet")
        return projection_message(projection)

    @router.get("/api/window", tags=["chart"])
    async def window() -> dict[str, Any]:
        samples = scheduler.snapshot()
        return {
            "samples": [s.model_dump() for s in samples],
            "count": len(samples),
            **scheduler.window_info(),
        }

    @router.websocket("/ws/chart")
    async def chart_ws(websocket: WebSocket) -> None:
        await sink.connect(websocket)
        try:
            # FE just listens; answer heartbeats
            while True:
                data = await websocket.receive_text()
                if data.strip().lower() == "ping":
                    await websocket.send_text("pong")
        except WebSocketDisconnect:
            await sink.disconnect(websocket)

    return router
