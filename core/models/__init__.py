# =============================================================================
# core/models/ - Data Models
# =============================================================================
# - catalog.py: QuoteCatalog, the immutable list of quotes
# =============================================================================

from .catalog import DEFAULT_QUOTES, QuoteCatalog

__all__ = [
    "DEFAULT_QUOTES",
    "QuoteCatalog",
]
