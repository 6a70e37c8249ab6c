from __future__ import annotations

import pytest

from genapi.models import AVAILABLE_MODELS, DEFAULT_MODEL, list_models, resolve_model
from genapi.settings import OPENROUTER_BASE_URL, GenAPISettings

_ENV_VARS = (
    "GENAPI_STORE_BACKEND",
    "STORAGE_PROVIDER",
    "GENAPI_REDIS_URL",
    "UPSTASH_REDIS_REST_URL",
    "GENAPI_REDIS_TOKEN",
    "UPSTASH_REDIS_REST_TOKEN",
    "GENAPI_STORE_FALLBACK",
    "OPENROUTER_API_KEY",
    "GENAPI_LLM_API_KEY",
    "GENAPI_LLM_MODEL",
    "GENAPI_LLM_MAX_RETRIES",
    "GENAPI_LLM_BACKOFF_BASE_S",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults_from_empty_env(clean_env):
    settings = GenAPISettings.from_env()
    assert settings.store_backend == "memory"
    assert settings.redis_url is None
    assert settings.store_fallback is True
    assert settings.llm_api_key is None
    assert settings.llm_base_url == OPENROUTER_BASE_URL
    assert settings.default_model == DEFAULT_MODEL
    assert settings.max_retries == 3
    assert settings.backoff_base_s == 1.0


def test_settings_prefer_genapi_variables_over_aliases(clean_env):
    clean_env.setenv("GENAPI_STORE_BACKEND", "Redis")
    clean_env.setenv("STORAGE_PROVIDER", "memory")
    clean_env.setenv("GENAPI_REDIS_URL", "redis://primary:6379/0")
    clean_env.setenv("UPSTASH_REDIS_REST_URL", "redis://alias:6379/0")
    clean_env.setenv("GENAPI_STORE_FALLBACK", "off")
    clean_env.setenv("GENAPI_LLM_MAX_RETRIES", "5")

    settings = GenAPISettings.from_env()

    assert settings.store_backend == "redis"
    assert settings.redis_url == "redis://primary:6379/0"
    assert settings.store_fallback is False
    assert settings.max_retries == 5


def test_default_model_is_in_catalog():
    assert DEFAULT_MODEL == "openai/gpt-4o-mini"
    assert DEFAULT_MODEL in AVAILABLE_MODELS
    assert list_models() == sorted(AVAILABLE_MODELS)


def test_every_model_has_display_metadata():
    for info in AVAILABLE_MODELS.values():
        assert info.name
        assert info.provider
        assert info.cost
        assert info.description


def test_resolve_model():
    assert resolve_model(None) == DEFAULT_MODEL
    assert resolve_model("  ") == DEFAULT_MODEL
    assert resolve_model(None, default="custom/model") == "custom/model"
    assert resolve_model("google/gemini-flash-1.5") == "google/gemini-flash-1.5"
    with pytest.raises(ValueError, match="Unknown model id"):
        resolve_model("meta/unknown")


def test_settings_treat_empty_numeric_variables_as_unset(clean_env):
    for name in (
        "GENAPI_LLM_MAX_RETRIES",
        "GENAPI_LLM_BACKOFF_BASE_S",
        "GENAPI_LLM_TEMPERATURE",
        "GENAPI_LLM_MAX_TOKENS",
    ):
        clean_env.setenv(name, "  ")

    settings = GenAPISettings.from_env()

    assert settings.max_retries == 3
    assert settings.backoff_base_s == 1.0
    assert settings.temperature == 0.7
    assert settings.max_tokens == 2000
