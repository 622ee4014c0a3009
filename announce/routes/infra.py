"""Infra endpoints: message demos and error triggers (non-prod helpers)."""

from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from announce.config import get_settings
from announce.utils.htmx import redirect
from announce.utils.messages import add_message, message_store

router = APIRouter()


@router.get("/demo/flash", tags=["infra"])
def demo_flash(
    request: Request, msg: str = "Operation completed", level: str = "success"
) -> Response:
    """Add a one-time message and redirect to home (HTMX-aware)."""
    if level not in get_settings().message_categories:
        raise HTTPException(400, f"Unknown message level: {level}")
    add_message(request, msg, level=level)
    return redirect(request, "/")


@router.get("/demo/messages", tags=["infra"])
def demo_messages(request: Request, category: str | None = None) -> dict[str, Any]:
    """Show pending messages without consuming them."""
    store = message_store(request)
    return {
        "count": store.count(category),
        "categories": list(store.categories),
        "messages": store.peek(category),
    }


@router.get("/debug/error", tags=["infra"])
def debug_error() -> None:
    """Intentionally raise an error to exercise the 500 handler in non-prod."""
    settings = get_settings()
    if settings.env == "prod":
        raise HTTPException(404, "Not found")
    raise RuntimeError("Simulated failure for testing purposes")
