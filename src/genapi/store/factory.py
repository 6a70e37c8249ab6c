"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Factory helpers for selecting the store backend once at startup.
"""

from __future__ import annotations

import logging
from typing import Any

from .base import TTLStore
from .inmemory import InMemoryTTLStore
from ..errors import ConfigurationError
from ..settings import GenAPISettings

logger = logging.getLogger("genapi.store")

_MEMORY_BACKENDS = ("mem", "memory", "inmemory", "in_memory")
_REDIS_BACKENDS = ("redis", "upstash")


def create_store(
    settings: GenAPISettings | None = None,
    *,
    redis_client: Any | None = None,
) -> TTLStore:
    """
    Create the process-wide store from settings.

    Backends:
    - `memory` (default)
    - `redis` / `upstash`

    Redis resolution:
    - Uses the provided `redis_client` when supplied.
    - Otherwise builds a client from `settings.redis_url` and
      `settings.redis_token`. Missing credentials fall back to the in-memory
      backend with a warning when `settings.store_fallback` is set, and raise
      `ConfigurationError` otherwise.

    Call this once and inject the returned instance; the in-memory backend's
    state lives only in that instance.
    """
    settings = settings or GenAPISettings()
    backend = settings.store_backend.strip().lower()

    if backend in _MEMORY_BACKENDS:
        logger.info("Using in-memory store backend")
        return InMemoryTTLStore()

    if backend in _REDIS_BACKENDS:
        from .redis import RedisTTLStore

        if redis_client is not None:
            return RedisTTLStore(redis_client, prefix=settings.redis_prefix)
        try:
            store = RedisTTLStore.from_url(
                settings.redis_url,
                settings.redis_token,
                prefix=settings.redis_prefix,
            )
        except ConfigurationError as exc:
            if not settings.store_fallback:
                raise
            logger.warning(
                "Failed to initialize Redis store, falling back to in-memory "
                "(entries are no longer durable or shared across processes): %s",
                exc,
            )
            return InMemoryTTLStore()
        logger.info("Using Redis store backend (prefix=%s)", settings.redis_prefix)
        return store

    raise ValueError(f"Unknown store backend: {settings.store_backend}")


def create_store_from_env(*, redis_client: Any | None = None) -> TTLStore:
    """Create the store from `GENAPI_*` environment variables."""
    return create_store(GenAPISettings.from_env(), redis_client=redis_client)
