# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .quote_service import DEFAULT_MESSAGE, QuoteService

__all__ = [
    "DEFAULT_MESSAGE",
    "QuoteService",
]
