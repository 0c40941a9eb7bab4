import asyncio
from contextlib import AbstractAsyncContextManager, asynccontextmanager, nullcontext
from typing import Protocol

from app.schemas.enrichment import EnrichmentResult


class EnrichmentStore(Protocol):
    def get(self, key: str) -> EnrichmentResult | None: ...

    def put(self, key: str, result: EnrichmentResult) -> None: ...


class InMemoryEnrichmentStore:
    """Unbounded process-local store. No TTL and no eviction."""

    def __init__(self) -> None:
        self._results: dict[str, EnrichmentResult] = {}

    def get(self, key: str) -> EnrichmentResult | None:
        return self._results.get(key)

    def put(self, key: str, result: EnrichmentResult) -> None:
        self._results[key] = result

    def __len__(self) -> int:
        return len(self._results)


class MissGuard(Protocol):
    def hold(self, key: str) -> AbstractAsyncContextManager[None]: ...


class NoopGuard:
    """Concurrent misses on one key all fetch; the last write wins."""

    def hold(self, key: str) -> AbstractAsyncContextManager[None]:
        return nullcontext()


class SingleFlightGuard:
    """Serialises misses per key so only the first caller fetches.

    Callers must re-check the store after entering ``hold``.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._holders: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
