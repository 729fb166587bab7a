"""Provider configuration."""

from dataclasses import dataclass, field

from libratopy.core.histogram import DEFAULT_PERCENTILE_PREFIX
from libratopy.core.models import Dialect

DEFAULT_BATCH_SIZE = 300
DEFAULT_INTERVAL = 60.0


@dataclass(frozen=True)
class ProviderConfig:
    """Settings consumed by Provider and its batcher.

    Attributes:
        url: Endpoint base URL; may embed "user:token@" credentials.
        interval: Flush interval in seconds.
        source: Source label of the legacy dialect.
        batch_size: Maximum number of items per request.
        ssa: Mark legacy envelopes as single-sample aggregates.
        dialect: Wire dialect, selected once when the provider is built.
        percentile_prefix: Infix between a histogram name and its
            percentile suffix (".p" gives "latency.p99").
        tags: Global tags added to every tagged measurement.
        reset_counters: Reset counters after each sample.
    """

    url: str | None = None
    interval: float = DEFAULT_INTERVAL
    source: str | None = None
    batch_size: int = DEFAULT_BATCH_SIZE
    ssa: bool = False
    dialect: Dialect = Dialect.LEGACY
    percentile_prefix: str = DEFAULT_PERCENTILE_PREFIX
    tags: dict[str, str] = field(default_factory=dict)
    reset_counters: bool = True

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")
        # Accept the dialect's string value
        object.__setattr__(self, "dialect", Dialect(self.dialect))
