"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Thin orchestration that stores generated JSON under short-lived tokens.
"""

from __future__ import annotations

import hmac
import json
import logging
import secrets
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import datetime, timezone

from .errors import AccessDeniedError
from .generator import StructuredGenerator
from .store import TTLStore
from .store.base import validate_ttl
from .types import DEFAULT_ITEM_COUNT, JSONValue

logger = logging.getLogger("genapi.service")

DEFAULT_TTL_S = 86400
_KEY_PREFIX = "temp:"


def _iso(epoch_s: float) -> str:
    return datetime.fromtimestamp(epoch_s, tz=timezone.utc).isoformat()


@dataclass(frozen=True, slots=True)
class MockRecord:
    """One generated resource as stored under its token."""

    token: str
    prompt: str
    payload: JSONValue
    created_at: str
    expires_at: str | None
    path: str = ""
    private: bool = False
    cors: str = "*"
    secret: str | None = None

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=True)

    @staticmethod
    def from_json(raw: str) -> "MockRecord":
        return MockRecord(**json.loads(raw))


class GenAPIService:
    """
    Compose the generator and the store.

    The generator and store never talk to each other; this service generates
    JSON, then writes the serialized record with the requested TTL, and later
    serves reads by token.
    """

    def __init__(
        self,
        store: TTLStore,
        generator: StructuredGenerator,
        *,
        default_ttl_s: float = DEFAULT_TTL_S,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = store
        self._generator = generator
        self._default_ttl_s = default_ttl_s
        self._clock = clock

    async def create(
        self,
        prompt: str,
        *,
        ttl_s: float | None = None,
        path: str = "",
        item_count: int | None = DEFAULT_ITEM_COUNT,
        model_id: str | None = None,
        private: bool = False,
        cors: str = "*",
    ) -> MockRecord:
        """Generate JSON for `prompt` and store it under a fresh token."""
        ttl = validate_ttl(self._default_ttl_s if ttl_s is None else ttl_s)
        payload = await self._generator.produce(
            prompt,
            item_count=item_count,
            model_id=model_id,
        )

        now = self._clock()
        record = MockRecord(
            token=secrets.token_urlsafe(16),
            prompt=prompt.strip(),
            payload=payload,
            created_at=_iso(now),
            expires_at=_iso(now + ttl) if ttl else None,
            path=path.strip("/"),
            private=private,
            cors=cors,
            secret=secrets.token_urlsafe(24) if private else None,
        )
        await self._store.put(_KEY_PREFIX + record.token, record.to_json(), ttl_s=ttl)
        logger.info("Stored token %s (ttl=%ss, private=%s)", record.token, ttl, private)
        return record

    async def fetch(self, token: str, *, secret: str | None = None) -> MockRecord | None:
        """
        Load the record for `token`, or `None` when missing or expired.

        Raises:
            AccessDeniedError: The record is private and `secret` does not match.
        """
        raw = await self._store.get(_KEY_PREFIX + token)
        if raw is None:
            return None
        record = MockRecord.from_json(raw)
        if record.private and not (
            secret is not None
            and record.secret is not None
            and hmac.compare_digest(secret.encode("utf-8"), record.secret.encode("utf-8"))
        ):
            raise AccessDeniedError(f"Token '{token}' requires a valid secret")
        return record

    async def discard(self, token: str) -> None:
        """Delete the record for `token`; no-op when absent."""
        await self._store.delete(_KEY_PREFIX + token)
