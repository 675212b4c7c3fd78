# =============================================================================
# app/routers/quotes.py - Quote Endpoints
# =============================================================================
# GET  /quotes          - full page with the placeholder message
# POST /quotes/generate - HTML fragment with one random quote
# =============================================================================

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.dependencies import QuoteServiceDep
from app.views import render_index, render_quote

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_class=HTMLResponse, name="quotes_index")
async def index(request: Request, service: QuoteServiceDep):
    """
    Show the quote page.

    The quote box starts out with the placeholder message.
    """
    return render_index(request, service.get_default_message())


@router.post("/generate", response_class=HTMLResponse, name="generate_quote")
async def generate_quote(request: Request, service: QuoteServiceDep):
    """
    Generate a random quote.

    Returns only the quote partial so the page can swap it in
    without a full reload.
    """
    quote = service.generate_quote()
    return render_quote(request, quote)
