# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: the quote catalog
# - services/: quote selection used by the HTTP layer
#
# Code in this package does not handle HTTP requests or responses.
# This keeps the logic testable and reusable.
# =============================================================================
