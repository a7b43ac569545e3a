"""Router – health check."""

from fastapi import APIRouter

from src.app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict:
    """Liveness probe; also reports whether provider credentials are present."""
    return {"status": "ok", "provider_configured": bool(settings.cloudinary_url)}
