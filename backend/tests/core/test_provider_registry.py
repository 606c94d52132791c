"""Provider Registry — one spec per provider, settings names and URLs derived.

Tests cover:
    - Every Provider has a spec and the spec knows its own enum member
    - Settings field names resolve on Settings
    - Endpoint URLs and auth headers per auth style
    - Unknown names raise UnknownProviderError
"""

import pytest

from llm_relay.config import Settings
from llm_relay.core.domain_types import Provider
from llm_relay.core.errors import UnknownProviderError
from llm_relay.core.provider_registry import PROVIDERS, get_provider_spec


def test_every_provider_registered():
    assert set(PROVIDERS) == set(Provider)
    for provider, spec in PROVIDERS.items():
        assert spec.provider is provider


def test_settings_fields_exist_for_every_spec():
    fields = Settings.model_fields
    for spec in PROVIDERS.values():
        assert spec.key_setting in fields
        assert spec.model_setting in fields
        assert spec.base_url_setting in fields


def test_key_env_vars_are_distinct():
    env_vars = [spec.key_env_var for spec in PROVIDERS.values()]
    assert len(set(env_vars)) == len(env_vars)


def test_gemini_endpoint_embeds_model():
    spec = PROVIDERS[Provider.GEMINI]
    url = spec.endpoint_url("https://generativelanguage.googleapis.com/", "gemini-2.0-flash")
    assert url == (
        "https://generativelanguage.googleapis.com"
        "/v1beta/models/gemini-2.0-flash:generateContent"
    )


def test_gemini_auth_header():
    headers = PROVIDERS[Provider.GEMINI].auth_headers("abc")
    assert headers["X-goog-api-key"] == "abc"
    assert "Authorization" not in headers


def test_bearer_auth_header():
    for provider in (Provider.MISTRAL, Provider.GROQ):
        headers = PROVIDERS[provider].auth_headers("abc")
        assert headers["Authorization"] == "Bearer abc"


def test_sdk_managed_auth_adds_no_key_header():
    headers = PROVIDERS[Provider.CLAUDE].auth_headers("abc")
    assert headers == {"Content-Type": "application/json"}


def test_fallback_error_message_names_provider():
    assert PROVIDERS[Provider.MISTRAL].fallback_error_message == (
        "An error occurred with the Mistral API."
    )


def test_get_provider_spec_case_insensitive():
    assert get_provider_spec(" Claude ") is PROVIDERS[Provider.CLAUDE]


def test_get_provider_spec_unknown():
    with pytest.raises(UnknownProviderError) as exc_info:
        get_provider_spec("openai")
    assert exc_info.value.http_status == 404
    assert exc_info.value.provider == "openai"
