"""Shared test fixtures for all test modules."""

import time
from collections.abc import Callable, Sequence

import pytest

from libratopy.core.models import Measurement

FIXED_NOW = 1702300017.5


class StaticSampler:
    """SamplerPort returning a fixed measurement list and recording periods."""

    def __init__(self, measurements: Sequence[Measurement] = ()) -> None:
        self.measurements = list(measurements)
        self.periods: list[int] = []

    def sample(self, period: int) -> list[Measurement]:
        self.periods.append(period)
        return list(self.measurements)


@pytest.fixture
def fixed_time(monkeypatch: pytest.MonkeyPatch) -> float:
    """Freeze time.time() at FIXED_NOW."""
    monkeypatch.setattr(time, "time", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def make_measurement() -> Callable[..., Measurement]:
    """Factory fixture for Measurement objects with sensible defaults."""

    def _make(name: str = "requests", **kwargs: object) -> Measurement:
        defaults: dict[str, object] = {
            "time": 1702300000,
            "period": 60,
            "tags": {"host": "web-1"},
            "sum": 10.0,
            "sum_squares": 40.0,
            "count": 5,
            "min": 1.0,
            "max": 4.0,
            "last": 3.0,
            "stddev": 2.0,
        }
        defaults.update(kwargs)
        return Measurement(name=name, **defaults)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def measurements(make_measurement: Callable[..., Measurement]):
    """Factory fixture returning n distinct, ordered measurements."""

    def _many(n: int) -> list[Measurement]:
        return [make_measurement(f"metric.{i}", sum=float(i)) for i in range(n)]

    return _many


@pytest.fixture
def static_sampler() -> Callable[..., StaticSampler]:
    """Factory fixture for StaticSampler."""
    return StaticSampler
