from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SESSION_SECRET = "change-me"


# ──────────────────────────────────────────────
# Settings (from environment variables / .env)
# ──────────────────────────────────────────────
class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Provider settings
    cloudinary_url: str = ""
    upload_folder: str = "laravel_uploads"
    provider_timeout: float | None = None  # seconds, None → wait forever

    # Upload settings
    max_upload_size_kb: int = 2048  # 2 MiB
    allowed_mimes: str = "jpeg,png,jpg,gif"

    # Session (flash messages)
    session_secret_key: str = DEFAULT_SESSION_SECRET
    session_cookie: str = "upload_session"

    # Application settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def uses_default_session_secret(self) -> bool:
        """True while the flash cookie is signed with the shipped placeholder key."""
        return self.session_secret_key == DEFAULT_SESSION_SECRET

    @property
    def max_upload_size(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_upload_size_kb * 1024

    @property
    def allowed_mimes_list(self) -> list[str]:
        """Parse allowed extensions from comma-separated string, keeping their order."""
        return [mime.strip().lower().lstrip(".") for mime in self.allowed_mimes.split(",") if mime.strip()]


# Global settings instance
settings = Settings()

# ──────────────────────────────────────────────
# Paths
# ──────────────────────────────────────────────
APP_DIR = Path(__file__).resolve().parent                  # src/app/
TEMPLATES_DIR = APP_DIR / "templates"

# ──────────────────────────────────────────────
# Messages
# ──────────────────────────────────────────────
UPLOAD_SUCCESS_MESSAGE = "Image uploaded successfully!"

# Pillow format name → extensions it may be uploaded under
IMAGE_FORMATS: dict[str, set[str]] = {
    "JPEG": {"jpeg", "jpg"},
    "PNG": {"png"},
    "GIF": {"gif"},
}
