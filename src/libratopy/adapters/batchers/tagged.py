"""Batcher for the tagged measurement dialect."""

import logging

import httpx

from libratopy.adapters.batchers.base import (
    build_request,
    check_interval,
    chunked,
    split_credentials,
)
from libratopy.core.encoding.tagged import encode_tagged_envelope
from libratopy.core.ports import SamplerPort

TAGGED_PATH = "/v1/measurements"

logger = logging.getLogger(__name__)


class TaggedBatcher:
    """BatcherPort implementation posting measurements to /v1/measurements.

    Measurements carry their own time and period, so no envelope-level
    timestamp is computed.

    Args:
        sampler: Source of the window's measurements.
        batch_size: Maximum number of measurements per request.
    """

    def __init__(self, sampler: SamplerPort, batch_size: int) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.sampler = sampler
        self.batch_size = batch_size

    def batch(self, url: str | httpx.URL, interval: float) -> list[httpx.Request]:
        """Sample the metrics and split them into tagged POST requests.

        Raises:
            EncodingError: If a chunk cannot be serialized.
            RequestBuildError: If the URL is malformed.
        """
        measurements = list(self.sampler.sample(check_interval(interval)))
        if not measurements:
            return []

        target, auth = split_credentials(url, TAGGED_PATH)

        requests = [
            build_request(target, encode_tagged_envelope(chunk), auth)
            for chunk in chunked(measurements, self.batch_size)
        ]

        logger.debug(
            "Built %d tagged request(s) for %d measurement(s) to %s",
            len(requests),
            len(measurements),
            target,
        )
        return requests
