"""Helpers shared by the dialect batchers.

Both dialects resolve a fixed path against the endpoint URL, split their
items into bounded chunks and wrap every chunk in a JSON POST request. The
endpoint's user info is moved from the URL into a Basic Auth header so no
returned request exposes it through its URL.
"""

import math
from collections.abc import Iterator, Sequence
from typing import TypeVar

import httpx

from libratopy.errors import RequestBuildError

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


def split_credentials(
    url: str | httpx.URL, path: str
) -> tuple[httpx.URL, httpx.BasicAuth | None]:
    """Strip user info from url and resolve path against it.

    Args:
        url: Endpoint base URL, optionally carrying user:password info.
        path: Absolute dialect path (e.g., "/v1/metrics").

    Returns:
        Tuple of (sanitized resolved URL, BasicAuth or None).

    Raises:
        RequestBuildError: If the URL cannot be parsed or resolved.
    """
    try:
        parsed = httpx.URL(url)
        auth = None
        if parsed.userinfo:
            auth = httpx.BasicAuth(parsed.username, parsed.password)
        sanitized = parsed.copy_with(username=None, password=None)
        resolved = sanitized.join(path)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestBuildError(f"Invalid endpoint URL: {exc}") from exc
    if not resolved.scheme or not resolved.host:
        raise RequestBuildError("Invalid endpoint URL: missing scheme or host")
    return resolved, auth


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield contiguous slices of at most size items, in order."""
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def build_request(
    url: httpx.URL, body: bytes, auth: httpx.BasicAuth | None
) -> httpx.Request:
    """Build a JSON POST request, attaching Basic Auth when given.

    Raises:
        RequestBuildError: If httpx rejects the request.
    """
    try:
        request = httpx.Request(
            "POST",
            url,
            content=body,
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestBuildError(f"Error building request: {exc}") from exc
    if auth is not None:
        # BasicAuth's flow sets the Authorization header on its first step
        request = next(auth.sync_auth_flow(request))
    return request


def aligned_time(now: float, interval: float) -> int:
    """Truncate now to the interval boundary as a Unix timestamp."""
    return int(math.floor(now / interval) * interval)


def check_interval(interval: float) -> int:
    """Validate a flush interval and return it in whole seconds."""
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")
    return int(interval)
