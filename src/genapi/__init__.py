"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

genapi: prompt-to-JSON generation with short-lived token storage.
"""

from .errors import (
    AccessDeniedError,
    ConfigurationError,
    ExtractionError,
    GenAPIError,
    GenerationError,
    TransportError,
)
from .generator import OpenRouterBackend, StructuredGenerator, TextBackend, extract_json
from .models import AVAILABLE_MODELS, DEFAULT_MODEL, ModelInfo, list_models, resolve_model
from .service import GenAPIService, MockRecord
from .settings import GenAPISettings
from .store import (
    InMemoryTTLStore,
    RedisTTLStore,
    TTLStore,
    create_store,
    create_store_from_env,
)
from .types import GenerationRequest, GenerationResult, StoreEntry

__all__ = [
    "GenAPIError",
    "ConfigurationError",
    "TransportError",
    "ExtractionError",
    "GenerationError",
    "AccessDeniedError",
    "GenAPISettings",
    "ModelInfo",
    "AVAILABLE_MODELS",
    "DEFAULT_MODEL",
    "list_models",
    "resolve_model",
    "TTLStore",
    "InMemoryTTLStore",
    "RedisTTLStore",
    "create_store",
    "create_store_from_env",
    "TextBackend",
    "OpenRouterBackend",
    "StructuredGenerator",
    "extract_json",
    "GenAPIService",
    "MockRecord",
    "StoreEntry",
    "GenerationRequest",
    "GenerationResult",
]
