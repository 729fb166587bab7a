"""Batcher for the legacy (untagged gauge) dialect."""

import logging
import time

import httpx

from libratopy.adapters.batchers.base import (
    aligned_time,
    build_request,
    check_interval,
    chunked,
    split_credentials,
)
from libratopy.core.encoding.legacy import encode_legacy_envelope
from libratopy.core.ports import SamplerPort

LEGACY_PATH = "/v1/metrics"

logger = logging.getLogger(__name__)


class LegacyBatcher:
    """BatcherPort implementation posting gauges to /v1/metrics.

    Every sampled measurement is projected to a LegacyGauge, so tags,
    attributes, last and stddev are not reported in this dialect.

    Args:
        sampler: Source of the window's measurements.
        batch_size: Maximum number of gauges per request.
        source: Optional source label for every envelope.
        ssa: Mark envelopes as single-sample aggregates.
    """

    def __init__(
        self,
        sampler: SamplerPort,
        batch_size: int,
        source: str | None = None,
        ssa: bool = False,
    ) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.sampler = sampler
        self.batch_size = batch_size
        self.source = source
        self.ssa = ssa

    def batch(self, url: str | httpx.URL, interval: float) -> list[httpx.Request]:
        """Sample the metrics and split them into legacy POST requests.

        Args:
            url: Endpoint base URL, optionally carrying user:password info.
            interval: Flush interval in seconds.

        Returns:
            Ordered list of requests; empty when there is nothing to report.

        Raises:
            EncodingError: If a chunk cannot be serialized.
            RequestBuildError: If the URL is malformed.
        """
        period = check_interval(interval)
        measure_time = aligned_time(time.time(), interval)

        gauges = [m.to_gauge() for m in self.sampler.sample(period)]
        if not gauges:
            return []

        # @tra: Adapter.Batcher.Credentials.NotInURL
        target, auth = split_credentials(url, LEGACY_PATH)

        requests = []
        for chunk in chunked(gauges, self.batch_size):
            body = encode_legacy_envelope(
                chunk,
                measure_time=measure_time,
                source=self.source,
                aggregate=self.ssa,
            )
            requests.append(build_request(target, body, auth))

        logger.debug(
            "Built %d legacy request(s) for %d gauge(s) to %s",
            len(requests),
            len(gauges),
            target,
        )
        return requests
