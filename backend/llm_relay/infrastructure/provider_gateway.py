"""Provider Gateway — exactly one outbound call per request, errors mapped, no retries.

Invariants:
    - send() returns an UpstreamReply for every provider response, success or not
    - Transport failures (DNS, connect, timeout) raise ProviderTransportError
    - SDK retries disabled (max_retries=0): one request in, one call out
    - Non-JSON provider bodies surface as {parse_error: True, raw: <text>}

Design Decisions:
    - Claude goes through the anthropic SDK, the others through raw httpx:
      both share one injectable httpx transport so tests never hit the network
    - APIStatusError re-read from its httpx response: same body parsing path
      as the HTTP providers
"""

import logging
from dataclasses import dataclass
from typing import Any

import anthropic
import httpx
from anthropic import APIConnectionError, APIStatusError

from llm_relay.core.domain_types import Payload, TransportKind
from llm_relay.core.errors import ErrorContext, ProviderTransportError
from llm_relay.core.provider_registry import ProviderSpec
from llm_relay.core.read_response import parse_upstream_body

logger = logging.getLogger(__name__)


@dataclass
class UpstreamReply:
    """Status code + parsed body of one provider response."""
    status_code: int
    data: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ProviderGateway:
    """Issues the single outbound call for a provider spec."""

    def __init__(
        self,
        timeout_seconds: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(
        self,
        spec: ProviderSpec,
        *,
        api_key: str,
        base_url: str,
        model: str,
        payload: Payload,
        context: ErrorContext | None = None,
    ) -> UpstreamReply:
        if spec.transport == TransportKind.ANTHROPIC_SDK:
            reply = await self._send_anthropic(
                api_key=api_key, base_url=base_url,
                payload=payload, context=context,
            )
        else:
            reply = await self._send_http(
                spec, api_key=api_key, base_url=base_url,
                model=model, payload=payload, context=context,
            )
        logger.info(
            f"{spec.display_name} API responded",
            extra={
                "provider": spec.provider.value,
                "model": model,
                "status_code": reply.status_code,
            },
        )
        return reply

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout_seconds, transport=self._transport,
        )

    def _anthropic_http_client(self) -> httpx.AsyncClient:
        """SDK-built client: keeps the SDK defaults (limits, redirects) with our transport."""
        return anthropic.DefaultAsyncHttpxClient(
            timeout=self.timeout_seconds, transport=self._transport,
        )

    async def _send_http(
        self,
        spec: ProviderSpec,
        *,
        api_key: str,
        base_url: str,
        model: str,
        payload: Payload,
        context: ErrorContext | None,
    ) -> UpstreamReply:
        url = spec.endpoint_url(base_url, model)
        try:
            async with self._http_client() as client:
                response = await client.post(
                    url, headers=spec.auth_headers(api_key), json=payload,
                )
        except httpx.HTTPError as e:
            raise ProviderTransportError(_describe(e), context=context) from e
        return UpstreamReply(
            response.status_code, parse_upstream_body(response.text),
        )

    async def _send_anthropic(
        self,
        *,
        api_key: str,
        base_url: str,
        payload: Payload,
        context: ErrorContext | None,
    ) -> UpstreamReply:
        async with self._anthropic_http_client() as http_client:
            client = anthropic.AsyncAnthropic(
                api_key=api_key,
                base_url=base_url,
                timeout=self.timeout_seconds,
                max_retries=0,
                http_client=http_client,
            )
            try:
                message = await client.messages.create(**payload)
            except APIStatusError as e:
                return UpstreamReply(
                    e.status_code, parse_upstream_body(e.response.text),
                )
            except APIConnectionError as e:
                # APITimeoutError subclasses APIConnectionError
                raise ProviderTransportError(_describe(e), context=context) from e
        return UpstreamReply(200, message.model_dump(mode="json"))


def _describe(error: Exception) -> str:
    return str(error) or type(error).__name__
