"""Service layer – rules an uploaded image must satisfy before it leaves the server."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from src.app.config import IMAGE_FORMATS, settings

logger = logging.getLogger(__name__)


def detect_image_format(content: bytes) -> str | None:
    """Return Pillow's format name for *content*, or ``None`` if it is not an image."""
    try:
        with Image.open(io.BytesIO(content)) as image:
            image.verify()
            return image.format
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return None


def validate_image(filename: str | None, content: bytes) -> list[str]:
    """
    Check an upload against the ``image`` field rules.

    Returns every message that applies; an empty list means the file is
    acceptable.  The type rule trusts the bytes, not the client's declared
    media type: the content must decode as an allowed format, and a
    filename extension, when present, must be allowed too.
    """
    if not filename and not content:
        return ["The image field is required."]

    messages: list[str] = []
    allowed = settings.allowed_mimes_list

    detected = detect_image_format(content)
    extension = Path(filename).suffix.lower().lstrip(".") if filename else ""

    if detected is None:
        messages.append("The image field must be an image.")

    type_ok = (
        detected is not None
        and bool(IMAGE_FORMATS.get(detected, set()) & set(allowed))
        and (not extension or extension in allowed)
    )
    if not type_ok:
        messages.append(f"The image field must be a file of type: {', '.join(allowed)}.")

    if len(content) > settings.max_upload_size:
        messages.append(
            f"The image field must not be greater than {settings.max_upload_size_kb} kilobytes.",
        )

    if messages:
        logger.debug("Upload %r (%d bytes, detected %s) failed validation", filename, len(content), detected)
    return messages


async def read_upload(image: UploadFile) -> bytes:
    """Read the upload, stopping one byte past the size limit."""
    return await image.read(settings.max_upload_size + 1)
