"""DashboardSink — pushes projections to connected chart frontends.

Architecture:
    RefreshScheduler  →  DashboardSink.apply_projection()
                              ↓
    FE  ←  /ws/chart  ←  broadcast of the chart option document

Newly connected clients immediately receive the latest projection so
they do not sit on a blank chart until the next tick.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from fastapi import WebSocket

from pulse_chart.domain.errors import SinkUnavailable
from pulse_chart.domain.projection import Projection
from pulse_chart.sinks.base import RenderSink

logger = logging.getLogger(__name__)


def projection_message(projection: Projection) -> dict[str, Any]:
    """Wire payload for one projection push."""
    return {
        "type": "projection",
        "option": projection.to_chart_option(),
        "projection": {
            "x_axis_labels": list(projection.x_axis_labels),
            "y_values": list(projection.y_values),
        },
    }


class DashboardSink(RenderSink):
    """Tracks connected chart clients and broadcasts projections to them."""

    def __init__(self) -> None:
        self._clients: set[WebSocket] = set()
        self._lock = asyncio.Lock()
        self._closed = False
        self._last_message: str | None = None

    # ── Client management ────────────────────────────────────────────

    async def connect(self, ws: WebSocket) -> None:
        await ws.accept()
        async with self._lock:
            self._clients.add(ws)
            last = self._last_message
        logger.info("Chart client connected (%d total)", len(self._clients))
        if last is not None:
            await ws.send_text(last)

    async def disconnect(self, ws: WebSocket) -> None:
        async with self._lock:
            self._clients.discard(ws)
        logger.info("Chart client disconnected (%d remaining)", len(self._clients))

    @property
    def client_count(self) -> int:
        return len(self._clients)

    async def close(self) -> None:
        """Tear the surface down.  Further applies raise SinkUnavailable."""
        self._closed = True
        async with self._lock:
            self._clients.clear()
        logger.info("Dashboard sink closed")

    # ── RenderSink ───────────────────────────────────────────────────

    def is_available(self) -> bool:
        return not self._closed

    async def apply_projection(self, projection: Projection) -> None:
        if self._closed:
            raise SinkUnavailable("dashboard sink is closed")
        message = json.dumps(projection_message(projection))
        self._last_message = message
        await self._broadcast(message)

    async def resize(self) -> None:
        if self._closed:
            raise SinkUnavailable("dashboard sink is closed")
        await self._broadcast(json.dumps({"type": "resize"}))

    # ── Internals ────────────────────────────────────────────────────

    async def _broadcast(self, message: str) -> None:
        """Send *message* to every connected client, dropping dead ones."""
        dead: set[WebSocket] = set()

        async with self._lock:
            clients = set(self._clients)

        for ws in clients:
            try:
                await ws.send_text(message)
            except Exception:
                dead.add(ws)

        if dead:
            async with self._lock:
                self._clients -= dead
            logger.info("Removed %d dead chart client(s)", len(dead))
