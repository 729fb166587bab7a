"""Wire encoders for the two Librato dialects."""

from libratopy.core.encoding.legacy import encode_gauge, encode_legacy_envelope
from libratopy.core.encoding.tagged import encode_measurement, encode_tagged_envelope

__all__ = [
    "encode_gauge",
    "encode_legacy_envelope",
    "encode_measurement",
    "encode_tagged_envelope",
]
