# =============================================================================
# app/views.py - HTML Rendering
# =============================================================================
# Two response formatters, selected by route:
# - render_index: full page wrapping the current message
# - render_quote: fragment holding only the quote, swapped into the page
# =============================================================================

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_index(request: Request, message: str) -> Response:
    """Render the full quotes page with `message` in the quote box."""
    return templates.TemplateResponse(
        request,
        "quotes/index.html",
        {"quote": message},
    )


def render_quote(request: Request, quote: str) -> Response:
    """Render the `_quote` partial on its own."""
    return templates.TemplateResponse(
        request,
        "quotes/_quote.html",
        {"quote": quote},
    )
