"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Retrying prompt-to-JSON generator.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .backend import TextBackend
from .extraction import extract_json
from .prompts import SYSTEM_PROMPT, build_user_prompt
from .retry import backoff_delay
from ..errors import ConfigurationError, ExtractionError, GenerationError
from ..models import resolve_model
from ..settings import GenAPISettings
from ..types import DEFAULT_ITEM_COUNT, GenerationRequest, GenerationResult, JSONContainer

logger = logging.getLogger("genapi.generator")

Sleep = Callable[[float], Awaitable[None]]


class StructuredGenerator:
    """
    Turn a natural-language prompt into a JSON object or array.

    Each attempt calls the backend once and runs the extraction heuristic on
    the reply. Backend errors, empty replies and extraction failures are
    logged and retried after ``base_delay * 2**(attempt-1)`` seconds; only
    exhausting every attempt raises ``GenerationError``. Attempts are strictly
    sequential and there is no overall deadline.

    Args:
        backend: Text-generation backend.
        settings: Defaults for model, retries, backoff and sampling.
        sleep: Awaitable used to suspend between attempts.
    """

    def __init__(
        self,
        backend: TextBackend,
        settings: GenAPISettings | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._backend = backend
        self._settings = settings or GenAPISettings()
        self._sleep = sleep

    async def produce(
        self,
        prompt: str,
        *,
        item_count: int | None = DEFAULT_ITEM_COUNT,
        model_id: str | None = None,
        max_retries: int | None = None,
    ) -> JSONContainer:
        """Generate JSON for `prompt` and return the value only."""
        request = GenerationRequest(
            prompt=prompt,
            item_count=item_count,
            model_id=model_id,
            max_retries=max_retries if max_retries is not None else self._settings.max_retries,
        )
        result = await self.generate(request)
        return result.value

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Run the retry loop for one request.

        Raises:
            GenerationError: Every attempt failed.
            ConfigurationError: The backend has no credentials; not retried.
        """
        if not request.prompt.strip():
            raise ValueError("prompt must be a non-empty string")

        model = resolve_model(request.model_id, default=self._settings.default_model)
        user_prompt = build_user_prompt(request.prompt, item_count=request.item_count)
        last_error: Exception | None = None

        for attempt in range(1, request.max_retries + 1):
            logger.info("Attempt %d/%d with model %s", attempt, request.max_retries, model)
            try:
                text = await self._backend.complete(
                    model=model,
                    system=SYSTEM_PROMPT,
                    user=user_prompt,
                    temperature=self._settings.temperature,
                    max_tokens=self._settings.max_tokens,
                )
                if not text:
                    raise ExtractionError("Empty response from LLM")
                logger.debug("Raw response length: %d chars", len(text))
                value = extract_json(text)
            except ConfigurationError:
                raise
            except Exception as exc:
                last_error = exc
                logger.warning("Attempt %d failed: %s", attempt, exc)
                if attempt == request.max_retries:
                    break
                await self._sleep(backoff_delay(attempt, self._settings.backoff_base_s))
                continue

            logger.info("Parsed JSON on attempt %d", attempt)
            return GenerationResult(value=value, attempts=attempt, model_id=model)

        raise GenerationError(
            f"Failed to generate valid JSON after {request.max_retries} attempts: {last_error}",
            last_cause=last_error,
            attempts=request.max_retries,
        ) from last_error
