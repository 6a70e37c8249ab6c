"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: generator/retry.py.
"""

from __future__ import annotations


def backoff_delay(attempt: int, base_delay_s: float) -> float:
    """Delay after failed `attempt` (1-based): base, 2*base, 4*base, ..."""
    if attempt < 1:
        raise ValueError("attempt must be >= 1")
    if base_delay_s < 0:
        raise ValueError("base_delay_s must be >= 0")
    return base_delay_s * (2 ** (attempt - 1))
