"""Payload Builders — provider-specific request bodies from one prompt shape.

Invariants:
    - Every builder takes (prompt, system_instruction, *, model, max_tokens)
    - A missing prompt is sent as "" (system-instruction-only requests allowed)
    - System instruction included only when non-empty
    - Pure functions: no settings access, no IO
"""

from llm_relay.core.domain_types import Payload


def build_gemini_payload(
    prompt: str | None,
    system_instruction: str | None,
    *,
    model: str,
    max_tokens: int,
) -> Payload:
    """generateContent body. Model travels in the URL, not the body."""
    payload: dict = {
        "contents": [
            {"role": "user", "parts": [{"text": prompt or ""}]},
        ],
    }
    if system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
    return Payload(payload)


def build_claude_payload(
    prompt: str | None,
    system_instruction: str | None,
    *,
    model: str,
    max_tokens: int,
) -> Payload:
    """Messages API kwargs, passed straight to AsyncAnthropic.messages.create."""
    payload: dict = {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt or ""}],
    }
    if system_instruction:
        payload["system"] = system_instruction
    return Payload(payload)


def build_chat_completion_payload(
    prompt: str | None,
    system_instruction: str | None,
    *,
    model: str,
    max_tokens: int,
) -> Payload:
    """OpenAI-style chat completion body (Mistral, Groq)."""
    messages = []
    if system_instruction:
        messages.append({"role": "system", "content": system_instruction})
    messages.append({"role": "user", "content": prompt or ""})
    return Payload({"model": model, "messages": messages})
