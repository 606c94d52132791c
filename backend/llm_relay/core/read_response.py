"""Response Reading — tolerant parsing of provider bodies into text or error messages.

Invariants:
    - parse_upstream_body never raises: non-JSON becomes {parse_error, raw}
    - Extractors return None (never raise) when the shape is unexpected
    - Extracted text is a non-empty str or None
"""

import json
from typing import Any


def parse_upstream_body(raw_text: str) -> Any:
    """Parse a provider response body. Empty → {}, invalid JSON → marker dict."""
    if not raw_text:
        return {}
    try:
        return json.loads(raw_text)
    except ValueError:
        return {"parse_error": True, "raw": raw_text}


def _dig(data: Any, *path: str | int) -> Any:
    """Follow dict keys / list indexes, returning None on any miss."""
    for step in path:
        if isinstance(step, int):
            if not isinstance(data, list) or len(data) <= step:
                return None
        elif not isinstance(data, dict):
            return None
        data = data[step] if isinstance(step, int) else data.get(step)
    return data


def _non_empty(text: Any) -> str | None:
    return text if isinstance(text, str) and text else None


def _join_text_parts(parts: Any, *, only_type: str | None = None) -> str | None:
    if not isinstance(parts, list):
        return None
    chunks = [
        p["text"] for p in parts
        if isinstance(p, dict)
        and isinstance(p.get("text"), str)
        and (only_type is None or p.get("type") == only_type)
    ]
    return _non_empty("".join(chunks))


# ─── Text Extraction ─────────────────────────────────────────────

def extract_gemini_text(data: Any) -> str | None:
    """candidates[0].content.parts[*].text"""
    return _join_text_parts(_dig(data, "candidates", 0, "content", "parts"))


def extract_claude_text(data: Any) -> str | None:
    """Text blocks of content[]; tool_use and thinking blocks skipped."""
    return _join_text_parts(_dig(data, "content"), only_type="text")


def extract_chat_completion_text(data: Any) -> str | None:
    """choices[0].message.content"""
    return _non_empty(_dig(data, "choices", 0, "message", "content"))


# ─── Error Message Extraction ────────────────────────────────────

def extract_nested_error_message(data: Any) -> str | None:
    """error.message — Gemini, Anthropic and OpenAI-compatible APIs.

    Gemini occasionally wraps the error object in a one-element list.
    """
    if isinstance(data, list) and data:
        data = data[0]
    return _non_empty(_dig(data, "error", "message"))


def extract_mistral_error_message(data: Any) -> str | None:
    """Mistral uses top-level message, or detail for request validation."""
    return (
        extract_nested_error_message(data)
        or _non_empty(_dig(data, "message"))
        or _non_empty(_dig(data, "detail"))
    )
