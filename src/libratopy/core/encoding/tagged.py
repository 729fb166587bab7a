"""JSON encoder for the tagged measurement dialect."""

import json
from collections.abc import Iterable
from typing import Any

from libratopy.core.models import Measurement
from libratopy.errors import EncodingError


def encode_measurement(measurement: Measurement) -> dict[str, Any]:
    """Convert a Measurement to its wire representation.

    sum_squares is never serialized in this dialect, and attributes are
    left out when empty.
    """
    obj: dict[str, Any] = {
        "name": measurement.name,
        "time": measurement.time,
        "period": measurement.period,
        "tags": dict(measurement.tags),
    }
    if measurement.attributes:
        obj["attributes"] = dict(measurement.attributes)
    obj.update(
        {
            "sum": measurement.sum,
            "count": measurement.count,
            "min": measurement.min,
            "max": measurement.max,
            "last": measurement.last,
            "stddev": measurement.stddev,
        }
    )
    return obj


def encode_tagged_envelope(measurements: Iterable[Measurement]) -> bytes:
    """Encode one chunk of measurements as a tagged envelope.

    Args:
        measurements: The chunk's measurements, in order.

    Returns:
        UTF-8 encoded JSON body of the form {"measurements": [...]}.

    Raises:
        EncodingError: If a value cannot be represented in JSON.
    """
    envelope = {"measurements": [encode_measurement(m) for m in measurements]}
    try:
        return json.dumps(envelope, allow_nan=False).encode()
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Error encoding tagged envelope: {exc}") from exc
