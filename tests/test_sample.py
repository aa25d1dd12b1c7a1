"""Tests for the Sample model and its boundary parsing."""

import math

import pytest

from pulse_chart.domain.errors import InvalidSample
from pulse_chart.domain.sample import Sample


def _valid_sample(**overrides) -> dict:
    """Return a valid sample dict, with optional overrides."""
    base = {"time": "14:03:27", "status": 50.7}
    base.update(overrides)
    return base


class TestSampleValidation:
    def test_valid_sample_parses(self) -> None:
        sample = Sample.model_validate(_valid_sample())
        assert sample.time == "14:03:27"
        assert sample.status == 50.7

    def test_integer_status_accepted(self) -> None:
        sample = Sample.model_validate(_valid_sample(status=42))
        assert sample.status == 42.0

    def test_empty_time_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(time=""))

    def test_blank_time_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(time="   "))

    def test_bool_status_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(status=True))

    def test_numeric_string_status_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(status="50"))

    def test_nan_status_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(status=float("nan")))

    def test_infinite_status_rejected(self) -> None:
        with pytest.raises(Exception):
            Sample.model_validate(_valid_sample(status=float("inf")))

    def test_sample_is_immutable(self) -> None:
        sample = Sample.model_validate(_valid_sample())
        with pytest.raises(Exception):
            sample.status = 0.0

    def test_str_format(self) -> None:
        assert str(Sample(time="10:00:00", status=51.5)) == "10:00:00=51.5"


class TestSampleParse:
    def test_parse_mapping(self) -> None:
        sample = Sample.parse(_valid_sample())
        assert isinstance(sample, Sample)

    def test_parse_returns_existing_sample(self) -> None:
        sample = Sample(time="t1", status=10)
        assert Sample.parse(sample) is sample

    def test_missing_time_raises_invalid_sample(self) -> None:
        with pytest.raises(InvalidSample) as exc_info:
            Sample.parse({"status": 10})
        assert "time" in exc_info.value.reason

    def test_missing_status_raises_invalid_sample(self) -> None:
        with pytest.raises(InvalidSample):
            Sample.parse({"time": "t1"})

    def test_non_numeric_status_raises_invalid_sample(self) -> None:
        with pytest.raises(InvalidSample):
            Sample.parse({"time": "t1", "status": "fast"})

    def test_bool_status_raises_invalid_sample(self) -> None:
        with pytest.raises(InvalidSample):
            Sample.parse({"time": "t1", "status": False})

    def test_unvalidated_sample_with_bool_status_rejected(self) -> None:
        bogus = Sample.model_construct(time="t1", status=True)
        with pytest.raises(InvalidSample):
            Sample.parse(bogus)

    def test_non_mapping_raises_invalid_sample(self) -> None:
        with pytest.raises(InvalidSample):
            Sample.parse(("t1", 10))

    def test_unvalidated_sample_with_nan_rejected(self) -> None:
        bogus = Sample.model_construct(time="t1", status=math.nan)
        with pytest.raises(InvalidSample):
            Sample.parse(bogus)

    def test_unvalidated_sample_with_blank_time_rejected(self) -> None:
        bogus = Sample.model_construct(time="", status=1.0)
        with pytest.raises(InvalidSample):
            Sample.parse(bogus)

    def test_invalid_sample_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Sample.parse({})
