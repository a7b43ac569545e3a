"""Error taxonomy and the exception handlers registered on the application."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from src.app.templating import render, wants_html

logger = logging.getLogger(__name__)


class ImageValidationError(Exception):
    """An uploaded file broke one or more of the field's rules."""

    def __init__(self, field: str, messages: list[str]):
        super().__init__("; ".join(messages))
        self.field = field
        self.messages = messages


class ProviderError(Exception):
    """The image-hosting provider failed or could not be reached."""


class ProviderConfigurationError(ProviderError):
    """The provider connection string is missing or malformed."""


class MalformedProviderResponse(ProviderError):
    """The provider answered successfully but without a usable ``secure_url``."""


# ──────────────────────────────────────────────
# Handlers
# ──────────────────────────────────────────────
def _field_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][-1])
        if error["type"] == "missing":
            message = f"The {field} field is required."
        else:
            message = f"The {field} field is invalid: {error['msg']}"
        errors.setdefault(field, []).append(message)
    return errors


async def image_validation_exception_handler(request: Request, exc: ImageValidationError) -> Response:
    logger.info("Rejected upload for field %r: %s", exc.field, exc.messages)
    if wants_html(request):
        return render(
            request,
            "upload.html",
            status_code=422,
            errors={exc.field: exc.messages},
        )
    return JSONResponse(
        status_code=422,
        content={
            "detail": [
                {"type": "value_error", "loc": ["body", exc.field], "msg": message}
                for message in exc.messages
            ]
        },
    )


async def form_validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    if wants_html(request):
        return render(
            request,
            "upload.html",
            status_code=422,
            errors=_field_errors(exc),
        )
    return await request_validation_exception_handler(request, exc)


async def malformed_provider_response_handler(request: Request, exc: MalformedProviderResponse) -> Response:
    logger.error("Provider response unusable: %s", exc)
    message = "The image host returned an unexpected response."
    if wants_html(request):
        return render(
            request,
            "error.html",
            status_code=502,
            message=message,
        )
    return JSONResponse(status_code=502, content={"detail": message})
