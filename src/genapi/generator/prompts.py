"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Instruction text sent to the text-generation backend.
"""

from __future__ import annotations

SYSTEM_PROMPT = """You are a JSON generator. You MUST output ONLY valid JSON (no preamble, no markdown, no explanations).

Rules:
1. Output ONLY valid JSON - nothing else
2. Do not include markdown code blocks or ```json
3. Do not include explanations before or after the JSON
4. If asked for an array, return a JSON array
5. If asked for an object, return a JSON object
6. Generate realistic, varied data that matches the user's request
7. Follow the exact schema or structure requested"""


def build_user_prompt(prompt: str, *, item_count: int | None = None) -> str:
    """Embed the caller prompt and optional array cardinality hint."""
    lines = [f'Generate JSON data that matches this request: "{prompt.strip()}"', ""]
    if item_count:
        lines.extend([f"Generate exactly {item_count} items if the output is an array.", ""])
    lines.append("Output only the JSON, nothing else.")
    return "\n".join(lines)
