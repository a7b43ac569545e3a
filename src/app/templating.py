"""Jinja2 page rendering shared by the routers and error handlers."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from src.app.config import TEMPLATES_DIR
from src.app.services.flash_service import pop_flashed

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def wants_html(request: Request) -> bool:
    """True when the caller is a browser expecting a page rather than JSON."""
    return "text/html" in request.headers.get("accept", "")


def render(request: Request, name: str, status_code: int = 200, **context):
    """Render *name*, consuming any pending flash values."""
    context.setdefault("errors", {})
    context["flash"] = pop_flashed(request)
    return templates.TemplateResponse(request, name, context, status_code=status_code)
