"""Tests for the FastAPI host: lifespan wiring, HTTP and WebSocket routes."""

from __future__ import annotations

from fastapi.testclient import TestClient

from pulse_chart.config import Settings
from pulse_chart.domain.enums import SchedulerState
from pulse_chart.main import build_producer, create_app
from pulse_chart.producers.replay import ReplayProducer
from pulse_chart.producers.synthetic import SyntheticProducer


def _settings(**overrides) -> Settings:
    base = {
        "window_capacity": 3,
        "refresh_interval_seconds": 3600.0,
        "initial_samples": [
            {"time": "t1", "status": 10},
            {"time": "t2", "status": 20},
            {"time": "t3", "status": 30},
            {"time": "t4", "status": 40},
        ],
    }
    base.update(overrides)
    return Settings(**base)


def _app(**overrides):
    return create_app(_settings(**overrides), producer=ReplayProducer([]))


class TestLifespan:
    def test_scheduler_runs_inside_lifespan(self) -> None:
        app = _app()
        with TestClient(app):
            assert app.state.scheduler.state == SchedulerState.RUNNING
        assert app.state.scheduler.state == SchedulerState.STOPPED
        assert not app.state.sink.is_available()


class TestHttpRoutes:
    def test_health(self) -> None:
        with TestClient(_app()) as client:
            body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["scheduler"] == "running"
        assert body["producer"] == "replay"
        assert body["window"]["capacity"] == 3
        assert body["window"]["size"] == 3

    def test_window_holds_latest_samples(self) -> None:
        with TestClient(_app()) as client:
            body = client.get("/api/window").json()
        assert body["count"] == 3
        assert [s["time"] for s in body["samples"]] == ["t2", "t3", "t4"]

    def test_projection_endpoint(self) -> None:
        with TestClient(_app()) as client:
            body = client.get("/api/projection").json()
        assert body["type"] == "projection"
        assert body["projection"]["y_values"] == [20.0, 30.0, 40.0]
        assert body["option"]["xAxis"]["data"] == ["t2", "t3", "t4"]


class TestChartWebSocket:
    def test_client_receives_current_projection(self) -> None:
        with TestClient(_app()) as client:
            with client.websocket_connect("/ws/chart") as ws:
                message = ws.receive_json()
                assert message["type"] == "projection"
                assert message["projection"]["x_axis_labels"] == ["t2", "t3", "t4"]

    def test_ping_pong(self) -> None:
        with TestClient(_app()) as client:
            with client.websocket_connect("/ws/chart") as ws:
                ws.receive_json()
                ws.send_text("ping")
                assert ws.receive_text() == "pong"


class TestBuildProducer:
    def test_synthetic_from_settings(self) -> None:
        producer = build_producer(_settings(producer="synthetic"))
        assert isinstance(producer, SyntheticProducer)

    def test_replay_loops_seed_samples(self) -> None:
        producer = build_producer(_settings(producer="replay"))
        assert isinstance(producer, ReplayProducer)
        assert producer.remaining == 4

    def test_replay_without_seed_samples_does_not_fail(self) -> None:
        cfg = _settings(producer="replay", initial_samples=[])
        producer = build_producer(cfg)
        assert isinstance(producer, ReplayProducer)
        assert producer.remaining == 0
        app = create_app(cfg)
        with TestClient(app) as client:
            assert client.get("/health").json()["scheduler"] == "running"
