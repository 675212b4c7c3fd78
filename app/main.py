# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the QuoteBoard web app.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from app import __version__
from app.config import settings
from app.dependencies import get_quote_service
from app.exceptions import QuoteBoardException, quoteboard_exception_handler
from app.routers import health, quotes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup refuses to continue with an empty quote catalog, so a
    misconfigured catalog fails the process instead of individual requests.
    """
    logger.info(f"Starting QuoteBoard in {settings.ENVIRONMENT} mode")

    catalog = get_quote_service().catalog
    catalog.ensure_not_empty()
    logger.info(f"Quote catalog loaded with {len(catalog)} quotes")

    yield

    logger.info("Shutting down QuoteBoard")


# Create FastAPI application
app = FastAPI(
    title="QuoteBoard",
    description="Serves a quote page and random motivational quotes as HTML fragments.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Quotes",
            "description": "Quote page and random quote generation",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(QuoteBoardException)
async def handle_quoteboard_exception(request: Request, exc: QuoteBoardException):
    """Handle custom QuoteBoard exceptions."""
    logger.error(f"{exc.code}: {exc.message}")
    return await quoteboard_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    quotes.router,
    prefix="/quotes",
    tags=["Quotes"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", include_in_schema=False)
async def root():
    """Send visitors to the quote page."""
    return RedirectResponse(url="/quotes")
