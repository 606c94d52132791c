"""Health Schemas — key presence report."""

from pydantic import BaseModel

from llm_relay.core.domain_types import KeyStatus


class HealthResponse(BaseModel):
    """`env` maps each key's environment variable name to present/missing."""
    ok: bool = True
    env: dict[str, KeyStatus]
