"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Text-generation backends used by the structured generator.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from ..errors import ConfigurationError
from ..settings import GenAPISettings

logger = logging.getLogger("genapi.generator.backend")


class TextBackend(Protocol):
    """One chat-completion call returning the raw response text."""

    async def complete(
        self,
        *,
        model: str,
        system: str,
        user: str,
        temperature: float,
        max_tokens: int,
    ) -> str | None: ...


class OpenRouterBackend(TextBackend):
    """Backend using `openai.AsyncOpenAI` against the OpenRouter API."""

    def __init__(self, settings: GenAPISettings | None = None, *, client: Any | None = None) -> None:
        self.settings = settings or GenAPISettings()
        self._client = client

    def _build_client(self) -> Any:
        """Construct or return the cached AsyncOpenAI client."""
        if self._client is not None:
            return self._client

        if not self.settings.llm_api_key:
            raise ConfigurationError(
                "OPENROUTER_API_KEY is not set. Get one at https://openrouter.ai"
            )

        from openai import AsyncOpenAI

        self._client = AsyncOpenAI(
            api_key=self.settings.llm_api_key,
            base_url=self.settings.llm_base_url,
            default_headers={
                "HTTP-Referer": self.settings.llm_site_url,
                "X-Title": self.settings.llm_site_name,
            },
        )
        return self._client

    async def complete(
        self,
        *,
        model: str,
        system: str,
        user: str,
        temperature: float,
        max_tokens: int,
    ) -> str | None:
        client = self._build_client()
        response = await client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content

    async def check_connection(self, *, model: str | None = None) -> bool:
        """Probe the backend with a tiny request; never raises."""
        try:
            text = await self.complete(
                model=model or self.settings.default_model,
                system="",
                user='Return a JSON object: {"test": true}',
                temperature=0.0,
                max_tokens=50,
            )
        except Exception as exc:
            logger.warning("Connection test failed: %s", exc)
            return False
        return bool(text)
