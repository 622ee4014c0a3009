"""Web routes (HTML) using Jinja2 + HTMX."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from announce.config import get_settings
from announce.web import render

router = APIRouter()


@router.get("/", response_class=HTMLResponse, tags=["web"])
def index(request: Request) -> HTMLResponse:
    """Render home page with any pending messages."""
    return render(request, "index.html", {"title": get_settings().app_name})
