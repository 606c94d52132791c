"""Domain Types — enums that replace bare provider strings across the codebase.

Invariants:
    - Provider values are the lowercase path segments used in routes
    - All valid states encoded as Enums — no raw string matching
"""

from enum import Enum
from typing import Any, NewType


# ─── Value Types ─────────────────────────────────────────────────

Payload = NewType("Payload", dict[str, Any])   # provider request body


# ─── Enums ───────────────────────────────────────────────────────

class Provider(str, Enum):
    """Hosted LLM providers the relay can forward to."""
    GEMINI = "gemini"
    CLAUDE = "claude"
    MISTRAL = "mistral"
    GROQ = "groq"


class TransportKind(str, Enum):
    """How the outbound call is made."""
    HTTP = "http"                     # raw JSON POST via httpx
    ANTHROPIC_SDK = "anthropic_sdk"   # anthropic.AsyncAnthropic


class AuthStyle(str, Enum):
    """Where the API key goes on an outbound HTTP request."""
    GOOG_API_KEY_HEADER = "x-goog-api-key"
    BEARER = "bearer"
    SDK_MANAGED = "sdk_managed"


class KeyStatus(str, Enum):
    """Health report value for one provider key."""
    PRESENT = "present"
    MISSING = "missing"
