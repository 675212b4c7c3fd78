# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from core.services import QuoteService


@lru_cache
def get_quote_service() -> QuoteService:
    """
    Get the process-wide QuoteService.

    The catalog is read-only, so one instance is shared by all requests.
    """
    return QuoteService()


# Type alias for dependency injection
QuoteServiceDep = Annotated[QuoteService, Depends(get_quote_service)]
