"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: store/__init__.py.
"""

from .base import TTLStore
from .factory import create_store, create_store_from_env
from .inmemory import InMemoryTTLStore
from .redis import RedisTTLStore

__all__ = [
    "TTLStore",
    "InMemoryTTLStore",
    "RedisTTLStore",
    "create_store",
    "create_store_from_env",
]
