"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Recover a JSON value from free-form model output.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable

from ..errors import ExtractionError
from ..types import JSONContainer

_FENCE_RE = re.compile(r"```(?:[A-Za-z0-9_+-]+)?[ \t]*\r?\n?([\s\S]*?)```")


def _reject_constant(token: str) -> None:
    raise ValueError(f"non-standard JSON constant: {token}")


def _strict_loads(text: str) -> JSONContainer:
    """Parse `text` as strict JSON; only objects and arrays are accepted."""
    value = json.loads(text, parse_constant=_reject_constant)
    if not isinstance(value, (dict, list)):
        raise ValueError(f"expected a JSON object or array, got {type(value).__name__}")
    return value


def _whole(text: str) -> str | None:
    return text.strip() or None


def _fenced(text: str) -> str | None:
    match = _FENCE_RE.search(text)
    return match.group(1).strip() if match else None


def _span(open_char: str, close_char: str) -> Callable[[str], str | None]:
    def find(text: str) -> str | None:
        start = text.find(open_char)
        end = text.rfind(close_char)
        if start == -1 or end <= start:
            return None
        return text[start : end + 1]

    return find


_STRATEGIES: tuple[Callable[[str], str | None], ...] = (
    _whole,
    _fenced,
    _span("{", "}"),
    _span("[", "]"),
)


def extract_json(text: str) -> JSONContainer:
    """
    Extract a JSON object or array from model output.

    Strategies run in order and the first strict parse wins: the whole text,
    the first fenced code block (with or without a language tag), the span
    from the first ``{`` to the last ``}``, then the span from the first
    ``[`` to the last ``]``.

    Raises:
        ExtractionError: No strategy produced valid JSON.
    """
    for strategy in _STRATEGIES:
        candidate = strategy(text)
        if candidate is None:
            continue
        try:
            return _strict_loads(candidate)
        except (ValueError, RecursionError):
            continue
    raise ExtractionError("No valid JSON found in response")
