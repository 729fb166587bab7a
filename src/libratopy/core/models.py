"""Core domain models for Librato-bound metric data."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Dialect(str, Enum):
    """Wire dialect of the Librato ingestion API."""

    LEGACY = "legacy"
    TAGGED = "tagged"


@dataclass(frozen=True)
class LegacyGauge:
    """Extended gauge record of the legacy (untagged) dialect.

    Every metric type is reported through this shape in the legacy API.
    Per-item tags and attributes do not exist in this dialect.

    Attributes:
        name: Metric name.
        period: Window length in seconds.
        count: Number of observations in the window.
        sum: Sum of observed values.
        min: Smallest observed value.
        max: Largest observed value.
        sum_squares: Sum of squared observed values.
    """

    name: str
    period: int
    count: int
    sum: float
    min: float
    max: float
    sum_squares: float


@dataclass(frozen=True)
class Measurement:
    """One metric's summary over one flush window.

    Attributes:
        name: Metric name.
        time: Window-aligned Unix timestamp in seconds.
        period: Window length in seconds.
        tags: Key-value pairs for metric dimensions.
        attributes: Optional per-measurement attributes (tagged dialect only).
        sum: Sum of observed values.
        sum_squares: Sum of squared observed values.
        count: Number of observations in the window.
        min: Smallest observed value.
        max: Largest observed value.
        last: Most recently observed value.
        stddev: Standard deviation of the window's observations.
    """

    name: str
    time: int
    period: int
    tags: dict[str, str] = field(default_factory=dict)
    attributes: dict[str, Any] | None = None
    sum: float = 0.0
    sum_squares: float = 0.0
    count: int = 0
    min: float = 0.0
    max: float = 0.0
    last: float = 0.0
    stddev: float = 0.0

    def to_gauge(self) -> LegacyGauge:
        """Project this measurement onto the legacy gauge shape.

        Tags, attributes, last and stddev are dropped.
        """
        return LegacyGauge(
            name=self.name,
            period=self.period,
            count=self.count,
            sum=self.sum,
            min=self.min,
            max=self.max,
            sum_squares=self.sum_squares,
        )

    @classmethod
    def from_gauge(cls, gauge: LegacyGauge, time: int) -> "Measurement":
        """Wrap a legacy gauge; to_gauge() gives it back unchanged."""
        return cls(
            name=gauge.name,
            time=time,
            period=gauge.period,
            sum=gauge.sum,
            sum_squares=gauge.sum_squares,
            count=gauge.count,
            min=gauge.min,
            max=gauge.max,
        )
