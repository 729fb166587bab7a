"""Counter and gauge primitives, plus label helpers shared by all metrics."""

import threading
from collections.abc import Callable
from typing import Any

from libratopy.core.models import Measurement

UNKNOWN_LABEL_VALUE = "unknown"


def labels_to_tags(*label_values: str) -> dict[str, str]:
    """Convert alternating key/value label values to a tags dict.

    A trailing key without a value is paired with "unknown".

    Example:
        >>> labels_to_tags("method", "GET", "status", "200")
        {'method': 'GET', 'status': '200'}
    """
    values = list(label_values)
    if len(values) % 2:
        values.append(UNKNOWN_LABEL_VALUE)
    return dict(zip(values[::2], values[1::2]))


def single_sample(
    name: str, value: float, period: int, time: int, tags: dict[str, str]
) -> Measurement:
    """Build a measurement describing exactly one observed value."""
    return Measurement(
        name=name,
        time=time,
        period=period,
        tags=tags,
        sum=value,
        sum_squares=value * value,
        count=1,
        min=value,
        max=value,
        last=value,
        stddev=0.0,
    )


class Metric:
    """Base class for named, labelled metrics.

    Args:
        name: Metric name (e.g., "http.requests").
        label_values: Alternating label keys and values.
        factory: Callable used by with_labels to obtain child metrics. A
            Provider passes its registration function here so children are
            reported; standalone metrics build unregistered children.
    """

    def __init__(
        self,
        name: str,
        label_values: tuple[str, ...] = (),
        factory: Callable[[str, tuple[str, ...]], Any] | None = None,
    ) -> None:
        self.name = name
        self.label_values = tuple(label_values)
        self._factory = factory

    @property
    def tags(self) -> dict[str, str]:
        """Label values as a tags dict."""
        return labels_to_tags(*self.label_values)

    @property
    def legacy_name(self) -> str:
        """Name used by the untagged dialect, labels as dotted key.value segments."""
        segments = [self.name]
        for key, value in self.tags.items():
            segments += [key, value]
        return ".".join(segments)

    def with_labels(self, *label_values: str) -> Any:
        """Return the metric of the same kind carrying extra label values."""
        merged = self.label_values + tuple(label_values)
        if self._factory is not None:
            return self._factory(self.name, merged)
        return type(self)(self.name, merged)


class Counter(Metric):
    """Monotonic counter reported as its accumulated delta per window."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._lock = threading.Lock()
        self._value = 0.0

    def add(self, delta: float = 1.0) -> None:
        """Increment the counter by delta."""
        with self._lock:
            self._value += delta

    def value(self) -> float:
        """Return the accumulated value."""
        with self._lock:
            return self._value

    def value_reset(self) -> float:
        """Return the accumulated value and reset it to zero atomically."""
        with self._lock:
            value, self._value = self._value, 0.0
            return value


class Gauge(Metric):
    """Level metric reported as its current value; never reset."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._lock = threading.Lock()
        self._value = 0.0

    def set(self, value: float) -> None:
        """Set the gauge to value."""
        with self._lock:
            self._value = value

    def add(self, delta: float) -> None:
        """Add delta (possibly negative) to the gauge."""
        with self._lock:
            self._value += delta

    def value(self) -> float:
        """Return the current value."""
        with self._lock:
            return self._value
