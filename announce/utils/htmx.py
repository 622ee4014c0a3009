"""HTMX helpers."""

from fastapi import Request, Response
from fastapi.responses import RedirectResponse


def is_htmx(request: Request) -> bool:
    """Check if request is from HTMX."""
    return request.headers.get("HX-Request", "false").lower() == "true"


def redirect(request: Request, url: str) -> Response:
    """
    Redirect after a POST/GET that queued messages.
    HTMX clients get a 204 with ``HX-Redirect`` so the swap doesn't eat the page;
    everyone else gets a standard 303.
    """
    if is_htmx(request):
        return Response(status_code=204, headers={"HX-Redirect": url})
    return RedirectResponse(url, status_code=303)
