"""libratopy - batch local metrics into Librato ingestion requests."""

from libratopy.adapters.batchers import LegacyBatcher, TaggedBatcher, create_batcher
from libratopy.config import ProviderConfig
from libratopy.core.histogram import Histogram
from libratopy.core.metrics import Counter, Gauge, labels_to_tags
from libratopy.core.models import Dialect, LegacyGauge, Measurement
from libratopy.core.ports import BatcherPort, QuantileEstimatorPort, SamplerPort
from libratopy.core.quantiles import StreamingHistogram
from libratopy.core.stats import squared_deviation, stddev
from libratopy.errors import EncodingError, LibratoError, RequestBuildError
from libratopy.provider import Provider

__all__ = [
    # Provider
    "Provider",
    "ProviderConfig",
    # Metrics
    "Counter",
    "Gauge",
    "Histogram",
    "StreamingHistogram",
    "labels_to_tags",
    # Models
    "Dialect",
    "LegacyGauge",
    "Measurement",
    # Ports
    "BatcherPort",
    "QuantileEstimatorPort",
    "SamplerPort",
    # Batchers
    "LegacyBatcher",
    "TaggedBatcher",
    "create_batcher",
    # Statistics
    "squared_deviation",
    "stddev",
    # Errors
    "EncodingError",
    "LibratoError",
    "RequestBuildError",
]
