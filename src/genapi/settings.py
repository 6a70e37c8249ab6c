"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Runtime settings and explicit environment loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .models import DEFAULT_MODEL

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_first(*names: str, default: str | None = None) -> str | None:
    """
    Return the first non-empty environment variable in `names`.

    Args:
        *names: Environment variable names to check in order.
        default: Value returned if no non-empty variable is found.
    """
    for name in names:
        raw = os.getenv(name)
        if raw is None:
            continue
        value = raw.strip()
        if value:
            return value
    return default


@dataclass(frozen=True, slots=True)
class GenAPISettings:
    """Explicit settings read once at backend-selection time."""

    store_backend: str = "memory"
    redis_url: str | None = None
    redis_token: str | None = None
    redis_prefix: str = "genapi:"
    store_fallback: bool = True

    llm_api_key: str | None = None
    llm_base_url: str = OPENROUTER_BASE_URL
    llm_site_url: str = ""
    llm_site_name: str = "GenAPI"
    default_model: str = DEFAULT_MODEL
    max_retries: int = 3
    backoff_base_s: float = 1.0
    temperature: float = 0.7
    max_tokens: int = 2000

    @staticmethod
    def from_env() -> "GenAPISettings":
        """Load settings from environment variables."""
        fallback = _env_first("GENAPI_STORE_FALLBACK", default="true") or "true"
        return GenAPISettings(
            store_backend=(
                _env_first("GENAPI_STORE_BACKEND", "STORAGE_PROVIDER", default="memory")
                or "memory"
            ).lower(),
            redis_url=_env_first("GENAPI_REDIS_URL", "UPSTASH_REDIS_REST_URL"),
            redis_token=_env_first("GENAPI_REDIS_TOKEN", "UPSTASH_REDIS_REST_TOKEN"),
            redis_prefix=os.getenv("GENAPI_REDIS_PREFIX", "genapi:"),
            store_fallback=fallback.lower() in _TRUE_VALUES,
            llm_api_key=_env_first("OPENROUTER_API_KEY", "GENAPI_LLM_API_KEY"),
            llm_base_url=_env_first("GENAPI_LLM_BASE_URL", default=OPENROUTER_BASE_URL)
            or OPENROUTER_BASE_URL,
            llm_site_url=os.getenv("OPENROUTER_SITE_URL", ""),
            llm_site_name=_env_first("OPENROUTER_SITE_NAME", default="GenAPI") or "GenAPI",
            default_model=_env_first("GENAPI_LLM_MODEL", default=DEFAULT_MODEL)
            or DEFAULT_MODEL,
            max_retries=int(_env_first("GENAPI_LLM_MAX_RETRIES", default="3") or "3"),
            backoff_base_s=float(
                _env_first("GENAPI_LLM_BACKOFF_BASE_S", default="1.0") or "1.0"
            ),
            temperature=float(_env_first("GENAPI_LLM_TEMPERATURE", default="0.7") or "0.7"),
            max_tokens=int(_env_first("GENAPI_LLM_MAX_TOKENS", default="2000") or "2000"),
        )
