"""Histogram accumulator and its per-window reduction.

A histogram keeps running count, sum, min, max, sum of squares and last
value together with a streaming quantile estimator. A reduction snapshots
all of them and resets them inside one critical section, so every
observation is reported in exactly one window.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from libratopy.core.metrics import Metric
from libratopy.core.models import LegacyGauge, Measurement
from libratopy.core.ports import QuantileEstimatorPort
from libratopy.core.quantiles import DEFAULT_MAX_BINS, StreamingHistogram
from libratopy.core.stats import stddev

DEFAULT_PERCENTILE_PREFIX = ".p"

# (suffix, quantile) pairs reported for every non-empty window
PERCENTILES = (("99", 0.99), ("95", 0.95), ("50", 0.50))


@dataclass(frozen=True)
class HistogramSnapshot:
    """State of one drained histogram window.

    Attributes:
        count: Number of observations.
        sum: Sum of observed values.
        min: Smallest observed value.
        max: Largest observed value.
        sum_squares: Sum of squared observed values.
        last: Most recently observed value.
        percentiles: (suffix, estimate) pairs, e.g. ("99", 0.42).
    """

    count: int
    sum: float
    min: float
    max: float
    sum_squares: float
    last: float
    percentiles: tuple[tuple[str, float], ...]


class Histogram(Metric):
    """Lock-protected histogram accumulator.

    Args:
        name: Metric name (e.g., "http.request.duration").
        label_values: Alternating label keys and values.
        factory: See Metric.
        percentile_prefix: Infix between the name and the percentile suffix.
        estimator_factory: Builds the quantile estimator. Defaults to a
            StreamingHistogram with 50 bins.
    """

    def __init__(
        self,
        name: str,
        label_values: tuple[str, ...] = (),
        factory: Callable[[str, tuple[str, ...]], Any] | None = None,
        percentile_prefix: str = DEFAULT_PERCENTILE_PREFIX,
        estimator_factory: Callable[[], QuantileEstimatorPort] | None = None,
    ) -> None:
        super().__init__(name, label_values, factory)
        self.percentile_prefix = percentile_prefix
        self._estimator_factory = estimator_factory or (
            lambda: StreamingHistogram(DEFAULT_MAX_BINS)
        )
        self._lock = threading.Lock()
        self._estimator = self._estimator_factory()
        self._count = 0
        self._sum = 0.0
        self._min = 0.0
        self._max = 0.0
        self._sum_squares = 0.0
        self._last = 0.0

    def with_labels(self, *label_values: str) -> "Histogram":
        merged = self.label_values + tuple(label_values)
        if self._factory is not None:
            return self._factory(self.name, merged)
        return Histogram(
            self.name,
            merged,
            percentile_prefix=self.percentile_prefix,
            estimator_factory=self._estimator_factory,
        )

    def observe(self, value: float) -> None:
        """Record one observation."""
        with self._lock:
            if self._count == 0 or value < self._min:
                self._min = value
            if self._count == 0 or value > self._max:
                self._max = value
            self._count += 1
            self._sum += value
            self._sum_squares += value * value
            self._last = value
            self._estimator.add(value)

    @property
    def estimator(self) -> QuantileEstimatorPort:
        return self._estimator

    def count(self) -> int:
        """Return the number of observations in the current window."""
        with self._lock:
            return self._count

    def drain(self) -> HistogramSnapshot | None:
        """Snapshot and reset the window under a single lock acquisition.

        Returns:
            The window's snapshot, or None when nothing was observed. An
            empty window is left untouched.
        """
        with self._lock:
            if self._count == 0:
                return None
            snapshot = HistogramSnapshot(
                count=self._count,
                sum=self._sum,
                min=self._min,
                max=self._max,
                sum_squares=self._sum_squares,
                last=self._last,
                percentiles=tuple(
                    (suffix, self._estimator.quantile(q)) for suffix, q in PERCENTILES
                ),
            )
            self._reset()
        return snapshot

    def _reset(self) -> None:
        # Caller holds self._lock
        self._count = 0
        self._sum = 0.0
        self._min = 0.0
        self._max = 0.0
        self._sum_squares = 0.0
        self._last = 0.0
        self._estimator.reset()

    def percentile_name(self, name: str, suffix: str) -> str:
        """Name of the point metric carrying one percentile estimate."""
        return f"{name}{self.percentile_prefix}{suffix}"

    def reduce(self, period: int, name: str | None = None) -> list[LegacyGauge]:
        """Reduce the window to legacy gauges and reset it.

        Args:
            period: Window length in seconds.
            name: Reported name; defaults to legacy_name.

        Returns:
            One aggregate gauge followed by the p99, p95 and p50 point
            gauges, or an empty list when nothing was observed.
        """
        # @tra: Core.Histogram.Reduce.SnapshotAndReset
        snapshot = self.drain()
        if snapshot is None:
            return []
        name = name or self.legacy_name
        gauges = [
            LegacyGauge(
                name=name,
                period=period,
                count=snapshot.count,
                sum=snapshot.sum,
                min=snapshot.min,
                max=snapshot.max,
                sum_squares=snapshot.sum_squares,
            )
        ]
        # Percentiles travel as degenerate single-sample gauges
        for suffix, value in snapshot.percentiles:
            gauges.append(
                LegacyGauge(
                    name=self.percentile_name(name, suffix),
                    period=period,
                    count=1,
                    sum=value,
                    min=value,
                    max=value,
                    sum_squares=value * value,
                )
            )
        return gauges

    def measurements(
        self,
        period: int,
        time: int,
        name: str | None = None,
        tags: dict[str, str] | None = None,
    ) -> list[Measurement]:
        """Reduce the window to measurements and reset it.

        Same drain as reduce(), but keeps tags, last and stddev.

        Args:
            period: Window length in seconds.
            time: Window-aligned Unix timestamp.
            name: Reported name; defaults to name.
            tags: Reported tags; defaults to the label tags.
        """
        snapshot = self.drain()
        if snapshot is None:
            return []
        name = name or self.name
        tags = self.tags if tags is None else tags
        result = [
            Measurement(
                name=name,
                time=time,
                period=period,
                tags=tags,
                sum=snapshot.sum,
                sum_squares=snapshot.sum_squares,
                count=snapshot.count,
                min=snapshot.min,
                max=snapshot.max,
                last=snapshot.last,
                stddev=stddev(snapshot.sum, snapshot.sum_squares, snapshot.count),
            )
        ]
        for suffix, value in snapshot.percentiles:
            result.append(
                Measurement(
                    name=self.percentile_name(name, suffix),
                    time=time,
                    period=period,
                    tags=dict(tags),
                    sum=value,
                    sum_squares=value * value,
                    count=1,
                    min=value,
                    max=value,
                    last=value,
                )
            )
        return result
