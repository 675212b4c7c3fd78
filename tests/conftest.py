# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a TestClient wired to a deterministic QuoteService
# =============================================================================

import os
import random

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_quote_service
from app.main import app
from core.models import QuoteCatalog
from core.services import QuoteService


EXPECTED_QUOTES = [
    "Believe you can and you're halfway there.",
    "The only way to do great work is to love what you do.",
    "Life is what happens when you're busy making other plans.",
    "Don't watch the clock; do what it does. Keep going.",
    "The best way to predict the future is to invent it.",
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def expected_quotes():
    """The five built-in quotes, in catalog order."""
    return list(EXPECTED_QUOTES)


@pytest.fixture
def seeded_service():
    """QuoteService over the default catalog with a fixed seed."""
    return QuoteService(QuoteCatalog.default(), rng=random.Random(1234))


@pytest.fixture
def client(seeded_service):
    """TestClient with startup run and the seeded service injected."""
    app.dependency_overrides[get_quote_service] = lambda: seeded_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
