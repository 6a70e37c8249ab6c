"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: store/redis.py.
"""

from __future__ import annotations

import math
from typing import Any

from redis.exceptions import RedisError

from .base import TTLStore, validate_ttl
from ..errors import ConfigurationError, TransportError


class RedisTTLStore(TTLStore):
    """
    Redis-backed store for multi-process deployments.

    Expiry is delegated to Redis' native ``SET ... EX``; this adapter keeps no
    expiry state of its own. Client failures surface as ``TransportError`` and
    are never retried here.

    Args:
        redis_client: A ``redis.asyncio.Redis`` client instance.
        prefix: Key prefix for namespacing.
    """

    backend_id = "redis"

    def __init__(self, redis_client: Any, *, prefix: str = "genapi:") -> None:
        self._redis = redis_client
        self._prefix = prefix

    @classmethod
    def from_url(
        cls,
        url: str | None,
        token: str | None,
        *,
        prefix: str = "genapi:",
    ) -> "RedisTTLStore":
        """Build a store from connection URL and access token; both are required."""
        if not url or not token:
            raise ConfigurationError("Redis store requires both a URL and an access token")

        if url.lower().startswith(("http://", "https://")):
            raise ConfigurationError(
                "Redis REST URLs are not supported; use a redis:// or rediss:// connection URL"
            )

        import redis.asyncio as redis

        try:
            client = redis.Redis.from_url(url, password=token)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid Redis URL: {exc}") from exc
        return cls(client, prefix=prefix)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def put(self, key: str, value: str, *, ttl_s: float | None = None) -> None:
        ttl = validate_ttl(ttl_s)
        try:
            if ttl is None:
                await self._redis.set(self._key(key), value)
            else:
                # Redis EX is whole seconds; round up so entries never expire early.
                await self._redis.set(self._key(key), value, ex=max(1, math.ceil(ttl)))
        except (RedisError, OSError) as exc:
            raise TransportError(f"Redis SET failed for key '{key}': {exc}") from exc

    async def get(self, key: str) -> str | None:
        try:
            blob = await self._redis.get(self._key(key))
        except (RedisError, OSError) as exc:
            raise TransportError(f"Redis GET failed for key '{key}': {exc}") from exc
        if blob is None:
            return None
        if isinstance(blob, bytes):
            return blob.decode("utf-8")
        return str(blob)

    async def delete(self, key: str) -> None:
        try:
            await self._redis.delete(self._key(key))
        except (RedisError, OSError) as exc:
            raise TransportError(f"Redis DEL failed for key '{key}': {exc}") from exc

    async def close(self) -> None:
        """Close the underlying client connection pool."""
        closer = getattr(self._redis, "aclose", None) or getattr(self._redis, "close", None)
        if closer is not None:
            await closer()
