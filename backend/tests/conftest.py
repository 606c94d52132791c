"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use real API keys
for _key in ("GEMINI_API_KEY", "CLAUDE_API_KEY", "MISTRAL_API_KEY", "GROQ_API_KEY"):
    os.environ[_key] = ""
os.environ.setdefault("LOG_FORMAT", "text")
