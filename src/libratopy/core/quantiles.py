"""Bounded-memory streaming histogram for quantile estimation.

Implements the Ben-Haim & Tom-Tov streaming histogram: observations are kept
as (value, count) bins sorted by value; once there are more than max_bins
bins, the two bins with the closest values are merged into their weighted
mean.
"""

import bisect

DEFAULT_MAX_BINS = 50


class StreamingHistogram:
    """Streaming implementation of QuantileEstimatorPort.

    Not thread-safe on its own; Histogram guards it with its lock.

    Args:
        max_bins: Maximum number of bins kept in memory.
    """

    def __init__(self, max_bins: int = DEFAULT_MAX_BINS) -> None:
        if max_bins < 1:
            raise ValueError(f"max_bins must be positive, got {max_bins}")
        self._max_bins = max_bins
        self._values: list[float] = []
        self._counts: list[float] = []
        self._total = 0

    def add(self, value: float) -> None:
        """Record one observation."""
        self._total += 1
        i = bisect.bisect_left(self._values, value)
        if i < len(self._values) and self._values[i] == value:
            self._counts[i] += 1
            return
        self._values.insert(i, value)
        self._counts.insert(i, 1)
        self._trim()

    def quantile(self, q: float) -> float:
        """Estimate the value at quantile q.

        Returns 0.0 when no observations were recorded.
        """
        remaining = q * self._total
        for value, count in zip(self._values, self._counts):
            remaining -= count
            if remaining <= 0:
                return value
        return self._values[-1] if self._values else 0.0

    def count(self) -> int:
        """Return the number of recorded observations."""
        return self._total

    def bins(self) -> list[tuple[float, float]]:
        """Return the (value, count) bins sorted by value."""
        return list(zip(self._values, self._counts))

    def reset(self) -> None:
        """Discard every recorded observation."""
        self._values.clear()
        self._counts.clear()
        self._total = 0

    def _trim(self) -> None:
        while len(self._values) > self._max_bins:
            # Closest pair of neighbouring bins
            i = min(
                range(1, len(self._values)),
                key=lambda j: self._values[j] - self._values[j - 1],
            )
            count = self._counts[i - 1] + self._counts[i]
            value = (
                self._values[i - 1] * self._counts[i - 1]
                + self._values[i] * self._counts[i]
            ) / count
            self._values[i - 1 : i + 1] = [value]
            self._counts[i - 1 : i + 1] = [count]
