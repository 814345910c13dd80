"""Memoises and deduplicates asynchronous reads by key."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from blog_reader.domain.entities import Failed, Loading, QueryState, Ready
from blog_reader.domain.exceptions import RequestFailedError

logger = logging.getLogger(__name__)

QueryKey = tuple[Any, ...]
Fetcher = Callable[[], Awaitable[Any]]


@dataclass
class _Entry:
    state: QueryState
    task: "asyncio.Task[None] | None" = None


class QueryCache:
    """In-process cache of query results keyed by logical query identity.

    Concurrent fetches of the same key share one in-flight request. Successful
    results stay cached until ``invalidate`` drops them. Failures are handed
    to every caller waiting on that request and then evicted, so the next
    consumer asks the remote side again.
    """

    def __init__(self) -> None:
        self._entries: dict[QueryKey, _Entry] = {}

    def peek(self, key: QueryKey) -> QueryState | None:
        """Current state for ``key``, or ``None`` when nothing is cached or running."""
        entry = self._entries.get(key)
        return entry.state if entry is not None else None

    def prefetch(self, key: QueryKey, fetcher: Fetcher) -> QueryState:
        """Start fetching ``key`` unless it is cached or already in flight."""
        entry = self._entries.get(key)
        if entry is None:
            entry = self._start(key, fetcher)
        return entry.state

    async def fetch(self, key: QueryKey, fetcher: Fetcher) -> QueryState:
        """Resolve ``key`` to a settled ``Ready`` or ``Failed`` state."""
        entry = self._entries.get(key)
        if entry is None:
            entry = self._start(key, fetcher)
        if entry.task is not None:
            # Shielded so one cancelled waiter does not abort the shared request.
            await asyncio.shield(entry.task)
        return entry.state

    def invalidate(self, prefix: QueryKey) -> int:
        """Drop every entry whose key starts with ``prefix``. Returns how many were dropped."""
        stale = [key for key in self._entries if key[: len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        if stale:
            logger.debug("Invalidated %d cached entries for %r", len(stale), prefix)
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def _start(self, key: QueryKey, fetcher: Fetcher) -> _Entry:
        entry = _Entry(state=Loading())
        self._entries[key] = entry
        entry.task = asyncio.create_task(self._run(key, entry, fetcher))
        return entry

    async def _run(self, key: QueryKey, entry: _Entry, fetcher: Fetcher) -> None:
        try:
            value = await fetcher()
        except RequestFailedError as exc:
            entry.state = Failed.from_error(exc)
            self._evict(key, entry)
            logger.info("Query %r failed: %s", key, entry.state.message)
        except BaseException:
            self._evict(key, entry)
            raise
        else:
            entry.state = Ready(value)
        finally:
            entry.task = None

    def _evict(self, key: QueryKey, entry: _Entry) -> None:
        # Only drop the entry this run belongs to; an invalidation may already
        # have replaced it with a newer request.
        if self._entries.get(key) is entry:
            del self._entries[key]
