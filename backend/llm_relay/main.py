"""LLM Relay API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RelayError → `{error}` JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
    - No state shared between requests: every request builds its own clients

Run: uvicorn llm_relay.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llm_relay.api.cors import ALLOWED_HEADERS, PreflightCorsMiddleware
from llm_relay.api.error_handlers import register_error_handlers
from llm_relay.api.routes import generate, health
from llm_relay.config import get_settings
from llm_relay.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"LLM Relay API started (default provider: {settings.default_provider})")
    yield
    logger.info("LLM Relay API shutting down")


app = FastAPI(title="LLM Relay API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=[h.strip() for h in ALLOWED_HEADERS.split(",")],
)
# Added last so it runs first: preflights never reach CORSMiddleware
app.add_middleware(PreflightCorsMiddleware, settings=settings)

app.include_router(health.router)
app.include_router(generate.router)

register_error_handlers(app)
