"""Exceptions raised while building Librato batches."""


class LibratoError(Exception):
    """Base exception for libratopy errors."""


class EncodingError(LibratoError, ValueError):
    """A batch envelope could not be serialized to JSON.

    Raised for values JSON cannot represent, such as NaN or infinity.
    """


class RequestBuildError(LibratoError, ValueError):
    """An outbound request could not be constructed.

    Raised when the endpoint URL is malformed or cannot be resolved.
    """
