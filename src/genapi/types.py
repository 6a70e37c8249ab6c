"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Shared data types for the store and the structured generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONContainer: TypeAlias = dict[str, JSONValue] | list[JSONValue]

DEFAULT_ITEM_COUNT = 10
DEFAULT_MAX_RETRIES = 3


@dataclass(frozen=True, slots=True)
class StoreEntry:
    """One stored value with its absolute expiry (epoch seconds, None = never)."""

    key: str
    value: str
    expires_at_s: float | None = None

    def is_expired(self, now_s: float) -> bool:
        return self.expires_at_s is not None and self.expires_at_s <= now_s


@dataclass(frozen=True, slots=True)
class GenerationRequest:
    """
    Input to one structured generation.

    ``item_count`` is advisory and only shapes the instruction when the
    requested output is an array. ``model_id`` of ``None`` selects the
    configured default model.
    """

    prompt: str
    item_count: int | None = DEFAULT_ITEM_COUNT
    model_id: str | None = None
    max_retries: int = DEFAULT_MAX_RETRIES

    def __post_init__(self) -> None:
        if not isinstance(self.prompt, str) or not self.prompt.strip():
            raise ValueError("prompt must be a non-empty string")
        if self.item_count is not None and self.item_count < 1:
            raise ValueError("item_count must be >= 1")
        if self.max_retries < 1:
            raise ValueError("max_retries must be >= 1")


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Generated JSON plus the attempt number that produced it."""

    value: JSONContainer
    attempts: int
    model_id: str
