# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for QuoteBoard:
# - test_catalog.py: QuoteCatalog behaviour
# - test_quote_service.py: placeholder message and random selection
# - test_routes.py: HTTP endpoints through TestClient
# - test_config.py: settings parsing
#
# Run tests with: poetry run pytest
# =============================================================================
