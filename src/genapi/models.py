"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Catalog of selectable text-generation models served through OpenRouter.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModelInfo:
    """Display metadata for one selectable model."""

    name: str
    provider: str
    cost: str
    speed: str
    quality: str
    description: str


AVAILABLE_MODELS: dict[str, ModelInfo] = {
    "openai/gpt-4o-mini": ModelInfo(
        name="GPT-4o Mini",
        provider="OpenAI",
        cost="$0.15/1M tokens",
        speed="Fast",
        quality="Good",
        description="Recommended - Reliable and affordable",
    ),
    "openai/gpt-3.5-turbo": ModelInfo(
        name="GPT-3.5 Turbo",
        provider="OpenAI",
        cost="$0.50/1M tokens",
        speed="Very Fast",
        quality="Good",
        description="Fast and cheap, great for testing",
    ),
    "anthropic/claude-3-haiku": ModelInfo(
        name="Claude 3 Haiku",
        provider="Anthropic",
        cost="$0.25/1M tokens",
        speed="Very Fast",
        quality="Good",
        description="Fast and affordable Claude model",
    ),
    "google/gemini-flash-1.5": ModelInfo(
        name="Gemini Flash 1.5",
        provider="Google",
        cost="$0.075/1M tokens",
        speed="Very Fast",
        quality="Good",
        description="Cheapest option, very fast",
    ),
    "qwen/qwen3-235b-a22b:free": ModelInfo(
        name="Qwen 3 235B A22B",
        provider="Qwen",
        cost="FREE",
        speed="Very Fast",
        quality="Good",
        description="Free tier, very fast",
    ),
}

DEFAULT_MODEL = "openai/gpt-4o-mini"


def list_models() -> list[str]:
    """List selectable model ids."""
    return sorted(AVAILABLE_MODELS.keys())


def resolve_model(model_id: str | None, *, default: str = DEFAULT_MODEL) -> str:
    """Return `model_id`, or `default` when unset; reject unknown explicit ids."""
    requested = (model_id or "").strip()
    if not requested:
        return default
    if requested not in AVAILABLE_MODELS:
        raise ValueError(f"Unknown model id '{requested}'")
    return requested
