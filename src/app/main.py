"""Image upload relay – FastAPI application entry-point."""

from contextlib import asynccontextmanager
import logging
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.middleware.sessions import SessionMiddleware

from src.app.config import Settings, settings
from src.app.errors import (
    ImageValidationError,
    MalformedProviderResponse,
    ProviderConfigurationError,
    form_validation_exception_handler,
    image_validation_exception_handler,
    malformed_provider_response_handler,
)
from src.app.router import health, pages, upload
from src.app.services.cloudinary_service import configure_cloudinary

# Configure logging from settings
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def check_settings(config: Settings) -> None:
    """Configure the provider SDK and warn about unsafe or missing settings."""
    if config.uses_default_session_secret:
        logger.warning("SESSION_SECRET_KEY is the default placeholder – set a real key before deploying.")

    if not config.cloudinary_url:
        logger.warning("CLOUDINARY_URL is not set – uploads will fail until it is configured.")
        return
    try:
        configure_cloudinary(config.cloudinary_url)
    except ProviderConfigurationError as exc:
        logger.error("Cloudinary not configured: %s", exc)


# ──────────────────────────────────────────────
# Lifespan: check configuration on startup
# ──────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    check_settings(settings)
    yield


# ──────────────────────────────────────────────
# Application factory
# ──────────────────────────────────────────────
app = FastAPI(
    title="Image Upload Relay",
    description="Upload an image from a browser form and host it on Cloudinary.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── session cookie carries flash messages between redirect and render ──
app.add_middleware(
    middleware_class=SessionMiddleware,
    secret_key=settings.session_secret_key,
    session_cookie=settings.session_cookie,
)

# ── error handlers ──
app.add_exception_handler(ImageValidationError, image_validation_exception_handler)
app.add_exception_handler(RequestValidationError, form_validation_exception_handler)
app.add_exception_handler(MalformedProviderResponse, malformed_provider_response_handler)

# ── register routers ──
app.include_router(pages.router)
app.include_router(health.router)
app.include_router(upload.router)
