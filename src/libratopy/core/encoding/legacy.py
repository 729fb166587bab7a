"""JSON encoder for the legacy (untagged gauge) dialect."""

import json
from collections.abc import Iterable
from typing import Any

from libratopy.core.models import LegacyGauge
from libratopy.errors import EncodingError


def encode_gauge(gauge: LegacyGauge) -> dict[str, Any]:
    """Convert a LegacyGauge to its wire representation.

    Args:
        gauge: The gauge to convert.

    Returns:
        Dict with the legacy gauge keys.
    """
    return {
        "name": gauge.name,
        "period": gauge.period,
        "count": gauge.count,
        "sum": gauge.sum,
        "min": gauge.min,
        "max": gauge.max,
        "sum_squares": gauge.sum_squares,
    }


def encode_legacy_envelope(
    gauges: Iterable[LegacyGauge],
    measure_time: int,
    source: str | None = None,
    aggregate: bool = False,
) -> bytes:
    """Encode one chunk of gauges as a legacy envelope.

    Args:
        gauges: The chunk's gauges, in order.
        measure_time: Window-aligned Unix timestamp shared by the chunk.
        source: Optional source label. Omitted from the body when empty.
        aggregate: Mark the whole envelope as single-sample aggregates.

    Returns:
        UTF-8 encoded JSON body.

    Raises:
        EncodingError: If a value cannot be represented in JSON.
    """
    envelope: dict[str, Any] = {}
    if source:
        envelope["source"] = source
    envelope["measure_time"] = measure_time
    envelope["gauges"] = [encode_gauge(g) for g in gauges]
    if aggregate:
        envelope["attributes"] = {"aggregate": True}

    try:
        return json.dumps(envelope, allow_nan=False).encode()
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Error encoding legacy envelope: {exc}") from exc
