# =============================================================================
# app/routers/ - API Route Handlers
# =============================================================================
# - health.py: health, readiness and liveness checks
# - quotes.py: quote page and quote generation
# =============================================================================

from . import health, quotes

__all__ = ["health", "quotes"]
