"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: generator/__init__.py.
"""

from .backend import OpenRouterBackend, TextBackend
from .core import StructuredGenerator
from .extraction import extract_json
from .prompts import SYSTEM_PROMPT, build_user_prompt
from .retry import backoff_delay

__all__ = [
    "TextBackend",
    "OpenRouterBackend",
    "StructuredGenerator",
    "extract_json",
    "SYSTEM_PROMPT",
    "build_user_prompt",
    "backoff_delay",
]
