"""
Persistent store adapter - get/set/remove raw string blobs by fixed key.
Challenge: Same contract for a persistent backend (Redis) and an in-process one (tests).
Design: One store instance per process, injected into the Repository; no module globals.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from redis.asyncio import Redis
from redis.exceptions import RedisError

from freelancehub.config import Settings
from freelancehub.core.errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StorageKeys:
    """The four fixed keys of the persisted layout."""

    users: str
    services: str
    bookings: str
    current_user: str

    @classmethod
    def with_prefix(cls, prefix: str = "freelance_") -> "StorageKeys":
        return cls(
            users=f"{prefix}users",
            services=f"{prefix}services",
            bookings=f"{prefix}bookings",
            current_user=f"{prefix}current_user",
        )


class KeyValueStore(Protocol):
    """Contract every backend implements. Failures surface as StorageError."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


class InMemoryStore:
    """Dict-backed store. State lives as long as the instance."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw blobs, for inspection in tests and tooling."""
        return dict(self._data)


class RedisStore:
    """Redis-backed store (connection pool managed by redis-py)."""

    def __init__(self, client: Redis):
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisStore":
        return cls(Redis.from_url(url, encoding="utf-8", decode_responses=True))

    async def get(self, key: str) -> str | None:
        try:
            return await self._client.get(key)
        except RedisError as e:
            logger.warning("store get failed: key=%s error=%s", key, e)
            raise StorageError(f"Storage unavailable while reading {key}") from e

    async def set(self, key: str, value: str) -> None:
        try:
            await self._client.set(key, value)
        except RedisError as e:
            logger.warning("store set failed: key=%s error=%s", key, e)
            raise StorageError(f"Storage unavailable while writing {key}") from e

    async def remove(self, key: str) -> None:
        try:
            await self._client.delete(key)
        except RedisError as e:
            logger.warning("store remove failed: key=%s error=%s", key, e)
            raise StorageError(f"Storage unavailable while removing {key}") from e

    async def ping(self) -> bool:
        """Readiness probe. False instead of raising when Redis is down."""
        try:
            return bool(await self._client.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        await self._client.aclose()


def create_store(settings: Settings) -> KeyValueStore:
    """Build the backend named by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        logger.info("Using in-memory store (state is lost on exit)")
        return InMemoryStore()
    logger.info("Using Redis store at %s", settings.redis_url)
    return RedisStore.from_url(settings.redis_url)
