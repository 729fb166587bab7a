"""Port interfaces for the batching pipeline.

These protocols define the contracts between the metric registry, the
quantile estimators and the dialect batchers. The batchers depend only on
these interfaces, not on concrete implementations.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import httpx

from libratopy.core.models import Measurement


@runtime_checkable
class SamplerPort(Protocol):
    """Port for sampling the current metric set.

    Implementations consume and reset their own flush window on every call.
    Examples: Provider.
    """

    def sample(self, period: int) -> Sequence[Measurement]:
        """Return one measurement per reported metric for this window.

        Args:
            period: Flush interval in whole seconds.

        Returns:
            Ordered sequence of Measurement objects. The order is stable
            for a given registry.
        """
        ...


@runtime_checkable
class QuantileEstimatorPort(Protocol):
    """Port for streaming quantile estimation.

    Examples: StreamingHistogram.
    """

    def add(self, value: float) -> None:
        """Record one observation."""
        ...

    def quantile(self, q: float) -> float:
        """Estimate the value at quantile q (0.0 - 1.0)."""
        ...

    def reset(self) -> None:
        """Discard every recorded observation."""
        ...


@runtime_checkable
class BatcherPort(Protocol):
    """Port for turning one flush window into ready-to-send requests.

    Examples: LegacyBatcher, TaggedBatcher.
    """

    def batch(self, url: str | httpx.URL, interval: float) -> list[httpx.Request]:
        """Sample the metrics and split them into POST requests.

        Args:
            url: Endpoint base URL, optionally carrying user:password info.
            interval: Flush interval in seconds.

        Returns:
            Ordered list of requests, empty when there is nothing to report.
        """
        ...
