"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: store/base.py.
"""

from __future__ import annotations

from typing import Protocol


class TTLStore(Protocol):
    """
    Key/value contract with expiring entries, shared by every backend.

    An entry written with ``ttl_s`` is logically absent once that many
    seconds have passed, whether or not the backend has purged it yet.
    ``ttl_s`` of ``None`` or ``0`` stores the value without expiry.
    """

    backend_id: str

    async def put(self, key: str, value: str, *, ttl_s: float | None = None) -> None: ...

    async def get(self, key: str) -> str | None: ...

    async def delete(self, key: str) -> None: ...

    async def close(self) -> None: ...


def validate_ttl(ttl_s: float | None) -> float | None:
    """Normalize a caller TTL: `None`/0 mean no expiry, negatives are rejected."""
    if ttl_s is None:
        return None
    if ttl_s < 0:
        raise ValueError("ttl_s must be >= 0")
    if ttl_s == 0:
        return None
    return float(ttl_s)
