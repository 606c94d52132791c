"""Route Dependencies — request body reading, provider resolution, service wiring.

Invariants:
    - Empty body reads as {}; a JSON value that is not an object reads as {}
    - Unparseable JSON → InvalidJsonBodyError (400) before any other check
    - get_provider_gateway / get_text_generator are the override points for tests
"""

import json
import logging

from fastapi import Depends, Request
from pydantic import ValidationError

from llm_relay.config import Settings, get_settings
from llm_relay.core.errors import (
    InvalidDefaultProviderError,
    InvalidJsonBodyError,
    InvalidRequestError,
    UnknownProviderError,
)
from llm_relay.core.provider_registry import ProviderSpec, get_provider_spec
from llm_relay.infrastructure.provider_gateway import ProviderGateway
from llm_relay.schemas.generate import GenerateRequest
from llm_relay.services.generate_text import TextGenerator

logger = logging.getLogger(__name__)


async def read_generate_request(request: Request) -> GenerateRequest:
    """Parse the body leniently; only malformed JSON and non-string fields fail."""
    raw = await request.body()
    body: object = {}
    if raw.strip():
        try:
            body = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Invalid JSON body: {e}", extra={"path": request.url.path})
            raise InvalidJsonBodyError() from e
    if not isinstance(body, dict):
        body = {}
    try:
        return GenerateRequest.model_validate(body)
    except ValidationError as e:
        raise InvalidRequestError(
            "prompt and systemInstruction must be strings.",
        ) from e


def resolve_provider(provider: str) -> ProviderSpec:
    return get_provider_spec(provider)


def resolve_default_provider(
    settings: Settings = Depends(get_settings),
) -> ProviderSpec:
    """A bad DEFAULT_PROVIDER is a server fault, not a client one."""
    try:
        return get_provider_spec(settings.default_provider)
    except UnknownProviderError:
        raise InvalidDefaultProviderError(settings.default_provider) from None


def get_provider_gateway(
    settings: Settings = Depends(get_settings),
) -> ProviderGateway:
    return ProviderGateway(timeout_seconds=settings.request_timeout_seconds)


def get_text_generator(
    settings: Settings = Depends(get_settings),
    gateway: ProviderGateway = Depends(get_provider_gateway),
) -> TextGenerator:
    return TextGenerator(settings, gateway)
