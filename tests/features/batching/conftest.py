"""BDD step definitions for batching features."""

import base64
import json
import time
from dataclasses import dataclass, field

import httpx
import pytest
from pytest_bdd import given, parsers, then, when

from libratopy import Provider, ProviderConfig


@dataclass
class BatchingScenarioContext:
    """Shared state between steps in a batching scenario."""

    provider: Provider | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def items(self) -> list[dict]:
        tagged = self.requests[0].url.path.endswith("measurements")
        key = "measurements" if tagged else "gauges"
        return [item for p in self.payloads() for item in p[key]]


@pytest.fixture
def ctx() -> BatchingScenarioContext:
    """Fresh scenario context for each test."""
    return BatchingScenarioContext()


# === Given ===
@given(parsers.parse("the clock reads {now:f}"))
def step_clock(monkeypatch: pytest.MonkeyPatch, now: float) -> None:
    monkeypatch.setattr(time, "time", lambda: now)


@given(parsers.parse('a "{dialect}" provider with batch size {size:d}'))
def step_provider(ctx: BatchingScenarioContext, dialect: str, size: int) -> None:
    ctx.provider = Provider(ProviderConfig(dialect=dialect, batch_size=size))


@given(parsers.parse("{n:d} counters each incremented once"))
def step_counters(ctx: BatchingScenarioContext, n: int) -> None:
    assert ctx.provider is not None
    for i in range(n):
        ctx.provider.new_counter(f"counter.{i:04d}").add()


@given(parsers.parse('a histogram "{name}" observing {values}'))
def step_histogram(ctx: BatchingScenarioContext, name: str, values: str) -> None:
    assert ctx.provider is not None
    histogram = ctx.provider.new_histogram(name)
    for value in values.split(","):
        histogram.observe(float(value))


# === When ===
@when(parsers.parse('the provider batches for "{url}" every {interval:d} seconds'))
def step_batch(ctx: BatchingScenarioContext, url: str, interval: int) -> None:
    assert ctx.provider is not None
    ctx.requests = ctx.provider.batch(url, interval)


# === Then ===
@then(parsers.parse("{n:d} requests are built"))
def step_request_count(ctx: BatchingScenarioContext, n: int) -> None:
    assert len(ctx.requests) == n


@then(parsers.parse("the request item counts are {counts}"))
def step_item_counts(ctx: BatchingScenarioContext, counts: str) -> None:
    expected = [int(c) for c in counts.split(",")]
    assert [len(p["measurements"]) for p in ctx.payloads()] == expected


@then(parsers.parse('every request posts JSON to "{path}"'))
def step_posts_json(ctx: BatchingScenarioContext, path: str) -> None:
    for request in ctx.requests:
        assert request.method == "POST"
        assert request.url.path == path
        assert request.headers["Content-Type"] == "application/json"


@then("the items keep their registration order")
def step_order(ctx: BatchingScenarioContext) -> None:
    names = [item["name"] for item in ctx.items()]
    assert names == sorted(names)


@then(parsers.parse("every envelope has measure_time {ts:d}"))
def step_measure_time(ctx: BatchingScenarioContext, ts: int) -> None:
    assert all(p["measure_time"] == ts for p in ctx.payloads())


@then(parsers.parse('no request URL contains "{text}"'))
def step_url_clean(ctx: BatchingScenarioContext, text: str) -> None:
    assert all(text not in str(r.url) for r in ctx.requests)


@then(parsers.parse('every request authenticates as "{username}" with "{password}"'))
def step_basic_auth(ctx: BatchingScenarioContext, username: str, password: str) -> None:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    for request in ctx.requests:
        assert request.headers["Authorization"] == f"Basic {token}"


@then(parsers.parse('the reported names are "{names}"'))
def step_names(ctx: BatchingScenarioContext, names: str) -> None:
    expected = [n.strip() for n in names.split(",")]
    assert [item["name"] for item in ctx.items()] == expected
