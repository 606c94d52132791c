"""Generate Routes — POST a prompt, get provider text back.

Invariants:
    - POST /api/generate uses settings.default_provider
    - POST /api/generate/{provider} uses the named provider (unknown → 404)
    - OPTIONS → 204 (PreflightCorsMiddleware); any other method → 405
    - Route handlers hold no provider logic (TextGenerator does)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from llm_relay.api.dependencies import (
    get_text_generator,
    read_generate_request,
    resolve_default_provider,
    resolve_provider,
)
from llm_relay.core.provider_registry import ProviderSpec
from llm_relay.schemas.generate import GenerateRequest, GenerateResponse
from llm_relay.services.generate_text import TextGenerator

router = APIRouter(prefix="/api/generate", tags=["generate"])


@router.post("", response_model=GenerateResponse)
async def generate_default(
    spec: ProviderSpec = Depends(resolve_default_provider),
    body: GenerateRequest = Depends(read_generate_request),
    generator: TextGenerator = Depends(get_text_generator),
):
    """Generate text with the default provider."""
    result = await generator.generate(spec, body)
    return JSONResponse(result.to_response())


@router.post(
    "/{provider}", response_model=GenerateResponse,
)
async def generate_with_provider(
    spec: ProviderSpec = Depends(resolve_provider),
    body: GenerateRequest = Depends(read_generate_request),
    generator: TextGenerator = Depends(get_text_generator),
):
    """Generate text with the provider named in the path."""
    result = await generator.generate(spec, body)
    return JSONResponse(result.to_response())

