"""Generate Text — the one request flow every provider route runs through.

Invariants:
    - Validation precedes key lookup; key lookup precedes any outbound call
    - Exactly one gateway.send() per successful validation
    - Provider non-success → UpstreamError with the provider's status passed through
    - Success with no extractable text → 200 with text "" and the raw body
    - Failures are raised, not logged: relay_error_handler logs each once
"""

import logging

from llm_relay.config import Settings
from llm_relay.core.errors import (
    ErrorContext, InvalidRequestError, MissingApiKeyError, UpstreamError,
)
from llm_relay.core.provider_registry import ProviderSpec
from llm_relay.infrastructure.provider_gateway import ProviderGateway
from llm_relay.schemas.generate import GenerateRequest, GenerateResponse

logger = logging.getLogger(__name__)


class TextGenerator:
    """Forwards a GenerateRequest to one provider and maps the reply."""

    def __init__(self, settings: Settings, gateway: ProviderGateway):
        self.settings = settings
        self.gateway = gateway

    async def generate(
        self, spec: ProviderSpec, request: GenerateRequest,
    ) -> GenerateResponse:
        if request.is_empty:
            raise InvalidRequestError("Prompt or system instruction is required.")

        model = getattr(self.settings, spec.model_setting)
        context = ErrorContext(provider=spec.provider.value, model=model)
        api_key = self._require_api_key(spec, context)

        payload = spec.build_payload(
            request.prompt,
            request.system_instruction,
            model=model,
            max_tokens=self.settings.claude_max_tokens,
        )
        reply = await self.gateway.send(
            spec,
            api_key=api_key,
            base_url=getattr(self.settings, spec.base_url_setting),
            model=model,
            payload=payload,
            context=context,
        )

        if not reply.ok:
            message = (
                spec.extract_error_message(reply.data)
                or spec.fallback_error_message
            )
            raise UpstreamError(message, reply.status_code, reply.data, context)

        text = spec.extract_text(reply.data)
        if text:
            return GenerateResponse(text=text)
        logger.warning(
            f"{spec.display_name} API returned no text",
            extra={"provider": spec.provider.value, "model": model},
        )
        return GenerateResponse(text="", raw=reply.data)

    def _require_api_key(self, spec: ProviderSpec, context: ErrorContext) -> str:
        api_key = getattr(self.settings, spec.key_setting)
        if not api_key:
            raise MissingApiKeyError(spec.key_env_var, context)
        return api_key
