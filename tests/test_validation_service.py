"""Tests for the upload validation rules."""

import asyncio
import io
from unittest.mock import AsyncMock, MagicMock

from PIL import Image

from src.app.services.validation_service import detect_image_format, read_upload, validate_image


def make_image(fmt: str) -> bytes:
    img_bytes = io.BytesIO()
    Image.new("RGB", (20, 20), color="blue").save(img_bytes, format=fmt)
    return img_bytes.getvalue()


def test_detect_image_format() -> None:
    assert detect_image_format(make_image("PNG")) == "PNG"
    assert detect_image_format(b"plain text") is None


def test_allowed_images_pass() -> None:
    assert validate_image("a.jpg", make_image("JPEG")) == []
    assert validate_image("a.jpeg", make_image("JPEG")) == []
    assert validate_image("a.png", make_image("PNG")) == []
    assert validate_image("a.gif", make_image("GIF")) == []


def test_empty_upload_is_missing() -> None:
    assert validate_image("", b"") == ["The image field is required."]


def test_disguised_extension_rejected() -> None:
    """A real PNG renamed to .bmp still breaks the extension rule."""
    messages = validate_image("a.bmp", make_image("PNG"))
    assert messages == ["The image field must be a file of type: jpeg, png, jpg, gif."]


def test_non_image_reports_every_rule() -> None:
    messages = validate_image("huge.txt", b"x" * (2048 * 1024 + 1))
    assert "The image field must be an image." in messages
    assert "The image field must be a file of type: jpeg, png, jpg, gif." in messages
    assert "The image field must not be greater than 2048 kilobytes." in messages


def test_size_limit_is_inclusive() -> None:
    content = make_image("JPEG")
    padded = content + b"\0" * (2048 * 1024 - len(content))
    assert len(padded) == 2048 * 1024
    assert not any("kilobytes" in message for message in validate_image("a.jpg", padded))


def test_read_upload_stops_past_the_limit() -> None:
    image = MagicMock()
    image.read = AsyncMock(return_value=b"x" * 10)
    assert asyncio.run(read_upload(image)) == b"x" * 10
    image.read.assert_awaited_once_with(2048 * 1024 + 1)
