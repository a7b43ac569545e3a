"""Router – upload form and image upload."""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse

from src.app.config import UPLOAD_SUCCESS_MESSAGE, settings
from src.app.errors import ImageValidationError
from src.app.services.cloudinary_service import (
    CloudinaryClient,
    extract_secure_url,
    get_cloudinary_client,
)
from src.app.services.flash_service import flash
from src.app.services.validation_service import read_upload, validate_image
from src.app.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Upload"])


@router.get("/upload", response_class=HTMLResponse, name="upload_form")
def show_form(request: Request) -> HTMLResponse:
    """Render the upload form, plus the result of the previous upload if any."""
    return render(request, "upload.html")


@router.post("/upload", name="upload_image")
async def upload_image(
    request: Request,
    image: UploadFile = File(...),
    client: CloudinaryClient = Depends(get_cloudinary_client),
) -> RedirectResponse:
    """
    Forward an image to the image host and redirect back with its URL.

    Parameters
    ----------
    image : UploadFile – jpeg, png, jpg or gif, at most 2048 KiB.

    The redirect (303) goes to the referring page, which then shows the
    flashed ``success`` message and ``image_url``.
    """
    # ── validate ──
    content = await read_upload(image)
    messages = validate_image(image.filename, content)
    if messages:
        raise ImageValidationError("image", messages)

    # ── forward to provider ──
    logger.info(
        "⬆️  Uploading %s (%d bytes) to folder %r",
        image.filename, len(content), settings.upload_folder,
    )
    payload = await client.upload(
        content,
        filename=image.filename or "upload",
        folder=settings.upload_folder,
    )
    image_url = extract_secure_url(payload)
    logger.info("✅ Uploaded %s → %s", image.filename, image_url)

    # ── redirect back with flash ──
    flash(request, success=UPLOAD_SUCCESS_MESSAGE, image_url=image_url)
    back = request.headers.get("referer") or str(request.url_for("upload_form"))
    return RedirectResponse(back, status_code=status.HTTP_303_SEE_OTHER)
