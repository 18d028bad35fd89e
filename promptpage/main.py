"""
Main application entry point - FastAPI app instance and configuration.
This is where the ASGI application is created and configured.
Run with: uvicorn promptpage.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from promptpage.ai.codegen import CodeGenerator
from promptpage.ai.errors import ConfigurationError
from promptpage.ai.monitoring.logger import configure_ai_logger
from promptpage.ai.providers import OpenAIProvider
from promptpage.core.config import settings
from promptpage.routers import generate

logging.getLogger("promptpage").setLevel(settings.log_level)
configure_ai_logger(settings)
logger = logging.getLogger("promptpage.main")


# ---------------------------------------------------------------------------
# LIFESPAN
# ---------------------------------------------------------------------------
# One httpx.AsyncClient (and its connection pool) for the whole process.
# A missing API key does not abort startup: the generator stays None and
# /api/generate answers 503 until the key is configured.
@asynccontextmanager
async def lifespan(app: FastAPI):
    http_client = httpx.AsyncClient()
    app.state.http_client = http_client

    try:
        provider = OpenAIProvider.from_settings(settings, http_client=http_client)
        app.state.code_generator = CodeGenerator(provider=provider)
    except ConfigurationError as e:
        logger.warning(f"Code generation unavailable: {e}")
        app.state.code_generator = None

    try:
        yield
    finally:
        await http_client.aclose()


# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The web UI is served from a different origin than the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# generate.router: /api/generate
app.include_router(generate.router)

# Malformed bodies (invalid JSON, non-string prompt) get the same
# {success, code, error} shape as every other failure.
app.add_exception_handler(RequestValidationError, generate.request_validation_error_handler)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does NOT call the LLM provider.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
