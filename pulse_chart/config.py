"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from pulse_chart.domain.sample import Sample


class Settings(BaseSettings):
    app_name: str = "pulse-chart"
    debug: bool = False
    log_level: str = "INFO"

    # Refresh loop
    refresh_interval_seconds: float = 2.0
    window_capacity: int = 15

    # Sample producer
    producer: str = "synthetic"
    producer_timeout_seconds: float = 5.0
    synthetic_base: float = 50.0
    synthetic_spread: float = 2.0

    # Seed window, JSON list of {"time": ..., "status": ...}
    initial_samples: list[Sample] = []

    model_config = {"env_prefix": "PULSE_"}


settings = Settings()
