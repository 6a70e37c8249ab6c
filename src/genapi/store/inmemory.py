"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: store/inmemory.py.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from threading import Lock

from .base import TTLStore, validate_ttl
from ..types import StoreEntry

logger = logging.getLogger("genapi.store.inmemory")


class InMemoryTTLStore(TTLStore):
    """
    Process-local store with per-key scheduled expiry.

    Each TTL write schedules a callback on the running event loop that purges
    the entry at its deadline, so memory is reclaimed without reads. Reads
    also compare the deadline against the clock, so an expired entry is never
    returned even if its callback has not fired yet.

    Writing a key, cancelling its previous expiry and scheduling the new one
    happen under one lock; an expiry callback only removes the exact entry it
    was scheduled for. State does not survive process restart.
    """

    backend_id = "inmemory"

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._rows: dict[str, StoreEntry] = {}
        self._timers: dict[str, asyncio.TimerHandle] = {}
        self._lock = Lock()

    async def put(self, key: str, value: str, *, ttl_s: float | None = None) -> None:
        ttl = validate_ttl(ttl_s)
        expires_at = self._clock() + ttl if ttl is not None else None
        entry = StoreEntry(key=key, value=value, expires_at_s=expires_at)
        loop = asyncio.get_running_loop()

        with self._lock:
            previous = self._timers.pop(key, None)
            if previous is not None:
                previous.cancel()
            self._rows[key] = entry
            if ttl is not None:
                self._timers[key] = loop.call_later(ttl, self._expire, entry)

    async def get(self, key: str) -> str | None:
        with self._lock:
            row = self._rows.get(key)
            if row is None:
                return None
            if row.is_expired(self._clock()):
                self._drop(key)
                return None
            return row.value

    async def delete(self, key: str) -> None:
        with self._lock:
            self._drop(key)

    async def close(self) -> None:
        """Cancel pending expiry callbacks and clear all entries."""
        with self._lock:
            for handle in self._timers.values():
                handle.cancel()
            self._timers.clear()
            self._rows.clear()

    def size(self) -> int:
        """Number of live (unexpired) entries."""
        return len(self.keys())

    def keys(self) -> list[str]:
        """Live keys, for debugging."""
        now = self._clock()
        with self._lock:
            return [key for key, row in self._rows.items() if not row.is_expired(now)]

    def _expire(self, entry: StoreEntry) -> None:
        """Scheduled-expiry callback; ignores entries that were since replaced."""
        with self._lock:
            if self._rows.get(entry.key) is not entry:
                return
            self._rows.pop(entry.key, None)
            self._timers.pop(entry.key, None)
        logger.debug("Expired key: %s", entry.key)

    def _drop(self, key: str) -> None:
        """Remove a key and cancel its expiry. Caller holds the lock."""
        handle = self._timers.pop(key, None)
        if handle is not None:
            handle.cancel()
        self._rows.pop(key, None)
