"""Unit tests for the QueryCache."""

import asyncio

import pytest

from blog_reader.application.services import QueryCache
from blog_reader.domain.entities import DEFAULT_ERROR_MESSAGE, Failed, Loading, Ready
from blog_reader.domain.exceptions import RequestFailedError


class CountingFetcher:
    """Async fetcher that counts calls and can be held open with an event."""

    def __init__(self, value=None, error: Exception | None = None):
        self.value = value
        self.error = error
        self.calls = 0
        self.release = asyncio.Event()
        self.release.set()

    async def __call__(self):
        self.calls += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.value


@pytest.mark.asyncio
async def test_fetch_memoises_successful_result():
    cache = QueryCache()
    fetcher = CountingFetcher(value=["a", "b"])

    first = await cache.fetch(("articles",), fetcher)
    second = await cache.fetch(("articles",), fetcher)

    assert first == Ready(["a", "b"])
    assert second == first
    assert fetcher.calls == 1


@pytest.mark.asyncio
async def test_concurrent_fetches_share_one_request():
    cache = QueryCache()
    fetcher = CountingFetcher(value="shared")
    fetcher.release.clear()

    waiters = [asyncio.create_task(cache.fetch(("article", "1"), fetcher)) for _ in range(3)]
    await asyncio.sleep(0)
    assert cache.peek(("article", "1")) == Loading()

    fetcher.release.set()
    results = await asyncio.gather(*waiters)

    assert results == [Ready("shared")] * 3
    assert fetcher.calls == 1


@pytest.mark.asyncio
async def test_peek_does_not_start_work():
    cache = QueryCache()

    assert cache.peek(("articles",)) is None
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_prefetch_starts_once_and_reports_loading():
    cache = QueryCache()
    fetcher = CountingFetcher(value=1)
    fetcher.release.clear()

    assert cache.prefetch(("articles",), fetcher) == Loading()
    assert cache.prefetch(("articles",), fetcher) == Loading()
    await asyncio.sleep(0)
    fetcher.release.set()

    assert await cache.fetch(("articles",), fetcher) == Ready(1)
    assert fetcher.calls == 1


@pytest.mark.asyncio
async def test_failure_is_delivered_then_evicted():
    """Waiters see the failure; the next consumer triggers a fresh request."""
    cache = QueryCache()
    fetcher = CountingFetcher(error=RequestFailedError("Failed to fetch blog"))

    state = await cache.fetch(("article", "404"), fetcher)

    assert state == Failed("Failed to fetch blog")
    assert cache.peek(("article", "404")) is None

    await cache.fetch(("article", "404"), fetcher)
    assert fetcher.calls == 2


@pytest.mark.asyncio
async def test_failure_without_message_uses_fallback():
    cache = QueryCache()

    state = await cache.fetch(("articles",), CountingFetcher(error=RequestFailedError("")))

    assert state == Failed(DEFAULT_ERROR_MESSAGE)


@pytest.mark.asyncio
async def test_invalidate_drops_matching_prefix_only():
    cache = QueryCache()
    await cache.fetch(("articles",), CountingFetcher(value=[]))
    await cache.fetch(("article", "1"), CountingFetcher(value="one"))
    await cache.fetch(("article", "2"), CountingFetcher(value="two"))

    assert cache.invalidate(("articles",)) == 1
    assert cache.peek(("articles",)) is None
    assert cache.peek(("article", "1")) == Ready("one")

    assert cache.invalidate(("article",)) == 2
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_invalidate_forces_refetch():
    cache = QueryCache()
    fetcher = CountingFetcher(value=["a"])
    await cache.fetch(("articles",), fetcher)

    fetcher.value = ["a", "b"]
    cache.invalidate(("articles",))
    state = await cache.fetch(("articles",), fetcher)

    assert state == Ready(["a", "b"])
    assert fetcher.calls == 2
