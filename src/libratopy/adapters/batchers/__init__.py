"""Dialect batchers implementing BatcherPort."""

from libratopy.adapters.batchers.legacy import LEGACY_PATH, LegacyBatcher
from libratopy.adapters.batchers.tagged import TAGGED_PATH, TaggedBatcher
from libratopy.core.models import Dialect
from libratopy.core.ports import BatcherPort, SamplerPort


def create_batcher(
    dialect: Dialect | str,
    sampler: SamplerPort,
    batch_size: int,
    source: str | None = None,
    ssa: bool = False,
) -> BatcherPort:
    """Return the batcher for a dialect.

    Args:
        dialect: Dialect or its string value ("legacy" or "tagged").
        sampler: Source of each window's measurements.
        batch_size: Maximum number of items per request.
        source: Legacy envelope source label (ignored by the tagged dialect).
        ssa: Legacy single-sample-aggregate marker (ignored by tagged).

    Raises:
        ValueError: If the dialect is unknown.
    """
    dialect = Dialect(dialect)
    if dialect is Dialect.TAGGED:
        return TaggedBatcher(sampler, batch_size)
    return LegacyBatcher(sampler, batch_size, source=source, ssa=ssa)


__all__ = [
    "LEGACY_PATH",
    "TAGGED_PATH",
    "LegacyBatcher",
    "TaggedBatcher",
    "create_batcher",
]
