"""Service layer – one-shot flash values carried in the session cookie."""

from __future__ import annotations

from typing import Any

from fastapi import Request

_FLASH_KEY = "_flash"


def flash(request: Request, **values: Any) -> None:
    """Attach *values* to the next rendered page."""
    pending = dict(request.session.get(_FLASH_KEY, {}))
    pending.update(values)
    request.session[_FLASH_KEY] = pending


def pop_flashed(request: Request) -> dict[str, Any]:
    """Return pending flash values and discard them."""
    return request.session.pop(_FLASH_KEY, {})
