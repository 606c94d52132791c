"""Health Probe — reports whether provider API keys are configured.

Invariants:
    - GET /api/health always returns 200 with ok=true if the process is up
    - Key values never appear in the response, only present/missing
    - GET /api/health/{provider} narrows the report to one key (unknown → 404)
"""

from fastapi import APIRouter, Depends

from llm_relay.api.dependencies import resolve_provider
from llm_relay.config import Settings, get_settings
from llm_relay.core.provider_registry import PROVIDERS, ProviderSpec
from llm_relay.schemas.health import HealthResponse
from llm_relay.services.health_report import report_key_status

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness probe plus key presence for every provider."""
    return HealthResponse(env=report_key_status(settings, PROVIDERS.values()))


@router.get("/{provider}", response_model=HealthResponse)
async def provider_health_check(
    spec: ProviderSpec = Depends(resolve_provider),
    settings: Settings = Depends(get_settings),
):
    return HealthResponse(env=report_key_status(settings, [spec]))

