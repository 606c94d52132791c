"""Provider Registry — one ProviderSpec per hosted LLM, looked up by name.

Invariants:
    - Every Provider enum member has exactly one spec in PROVIDERS
    - Settings field names derive from the provider value ({value}_api_key, ...)
    - get_provider_spec() raises UnknownProviderError, never KeyError
    - API keys only ever appear in outbound headers, never in URLs

Design Decisions:
    - Explicit dict over auto-discovery: adding a provider means one entry here
      plus its settings fields
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from llm_relay.core.build_payload import (
    build_chat_completion_payload,
    build_claude_payload,
    build_gemini_payload,
)
from llm_relay.core.domain_types import AuthStyle, Payload, Provider, TransportKind
from llm_relay.core.errors import UnknownProviderError
from llm_relay.core.read_response import (
    extract_chat_completion_text,
    extract_claude_text,
    extract_gemini_text,
    extract_mistral_error_message,
    extract_nested_error_message,
)

PayloadBuilder = Callable[..., Payload]
TextExtractor = Callable[[Any], str | None]


@dataclass(frozen=True)
class ProviderSpec:
    """Everything provider-specific about one outbound call."""
    provider: Provider
    display_name: str
    key_env_var: str
    transport: TransportKind
    auth_style: AuthStyle
    path_template: str
    build_payload: PayloadBuilder
    extract_text: TextExtractor
    extract_error_message: TextExtractor

    @property
    def key_setting(self) -> str:
        return f"{self.provider.value}_api_key"

    @property
    def model_setting(self) -> str:
        return f"{self.provider.value}_model"

    @property
    def base_url_setting(self) -> str:
        return f"{self.provider.value}_base_url"

    @property
    def fallback_error_message(self) -> str:
        return f"An error occurred with the {self.display_name} API."

    def endpoint_url(self, base_url: str, model: str) -> str:
        return base_url.rstrip("/") + self.path_template.format(model=model)

    def auth_headers(self, api_key: str) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.auth_style == AuthStyle.GOOG_API_KEY_HEADER:
            headers["X-goog-api-key"] = api_key
        elif self.auth_style == AuthStyle.BEARER:
            headers["Authorization"] = f"Bearer {api_key}"
        return headers


PROVIDERS: dict[Provider, ProviderSpec] = {
    Provider.GEMINI: ProviderSpec(
        provider=Provider.GEMINI,
        display_name="Gemini",
        key_env_var="GEMINI_API_KEY",
        transport=TransportKind.HTTP,
        auth_style=AuthStyle.GOOG_API_KEY_HEADER,
        path_template="/v1beta/models/{model}:generateContent",
        build_payload=build_gemini_payload,
        extract_text=extract_gemini_text,
        extract_error_message=extract_nested_error_message,
    ),
    Provider.CLAUDE: ProviderSpec(
        provider=Provider.CLAUDE,
        display_name="Claude",
        key_env_var="CLAUDE_API_KEY",
        transport=TransportKind.ANTHROPIC_SDK,
        auth_style=AuthStyle.SDK_MANAGED,
        path_template="/v1/messages",
        build_payload=build_claude_payload,
        extract_text=extract_claude_text,
        extract_error_message=extract_nested_error_message,
    ),
    Provider.MISTRAL: ProviderSpec(
        provider=Provider.MISTRAL,
        display_name="Mistral",
        key_env_var="MISTRAL_API_KEY",
        transport=TransportKind.HTTP,
        auth_style=AuthStyle.BEARER,
        path_template="/v1/chat/completions",
        build_payload=build_chat_completion_payload,
        extract_text=extract_chat_completion_text,
        extract_error_message=extract_mistral_error_message,
    ),
    Provider.GROQ: ProviderSpec(
        provider=Provider.GROQ,
        display_name="Groq",
        key_env_var="GROQ_API_KEY",
        transport=TransportKind.HTTP,
        auth_style=AuthStyle.BEARER,
        path_template="/openai/v1/chat/completions",
        build_payload=build_chat_completion_payload,
        extract_text=extract_chat_completion_text,
        extract_error_message=extract_nested_error_message,
    ),
}


def get_provider_spec(name: str) -> ProviderSpec:
    """Resolve a provider by its path name (case-insensitive)."""
    try:
        return PROVIDERS[Provider(name.strip().lower())]
    except ValueError:
        raise UnknownProviderError(name) from None
