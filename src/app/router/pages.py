"""Router – welcome page."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.app.templating import render

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, name="welcome")
def welcome(request: Request) -> HTMLResponse:
    return render(request, "welcome.html")
