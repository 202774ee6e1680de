"""ttskit FastAPI application entry point.

Exposes the catalog of supported TTS providers and validation of
custom provider configurations.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, status

from ttskit.config import load_tts_provider_config
from ttskit.speech.tts.errors import InvalidProviderTagError
from ttskit.speech.tts.schemas import (
    CustomTtsProviderConfig,
    TtsProviderInfo,
    get_provider_info,
    provider_catalog,
)


def get_log_level(name: str | None = None) -> int:
    """Resolve a LOG_LEVEL name, falling back to INFO when unknown."""
    name = (name if name is not None else os.getenv("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelNamesMapping().get(name)
    return level if level is not None else logging.INFO


# Configure logging
logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tts", tags=["tts"])


@router.get("/providers")
async def list_providers() -> dict[str, list[TtsProviderInfo]]:
    """List every supported TTS provider."""
    return {"providers": provider_catalog()}


@router.post("/providers/validate")
async def validate_provider_config(config: CustomTtsProviderConfig) -> CustomTtsProviderConfig:
    """Validate and normalize a custom provider configuration."""
    return config


@router.get("/providers/{name}")
async def get_provider(name: str) -> TtsProviderInfo:
    """Get the catalog entry for a single provider tag.

    Raises:
        HTTPException: If the tag is not a supported provider.
    """
    try:
        return get_provider_info(name)
    except InvalidProviderTagError as e:
        logger.info("Unknown TTS provider requested: %r", name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        ) from e


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Loads the custom TTS provider from the environment at startup so a
    misconfigured deployment fails fast.
    """
    logger.info("ttskit starting up...")
    app.state.tts_provider_config = load_tts_provider_config()
    if app.state.tts_provider_config is None:
        logger.info("No custom TTS provider configured")

    yield

    logger.info("ttskit shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="ttskit",
        description="TTS provider selection for custom provider integration",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "service": "ttskit"}

    return app


app = create_app()
