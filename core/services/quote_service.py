# =============================================================================
# core/services/quote_service.py - Quote Business Logic
# =============================================================================
# Serves the placeholder message and picks random quotes from the catalog.
# Separates HTTP concerns from the selection logic.
# =============================================================================

import logging
import random

from core.models.catalog import QuoteCatalog
from app.exceptions import EmptyCatalogError

logger = logging.getLogger(__name__)


DEFAULT_MESSAGE = "Click the button to generate a quote."


class QuoteService:
    """
    Service for quote operations.

    Every call is independent: no request history influences the output.
    """

    def __init__(
        self,
        catalog: QuoteCatalog | None = None,
        rng: random.Random | None = None,
    ):
        """
        Args:
            catalog: Quotes to draw from (defaults to the built-in catalog)
            rng: Random source, injectable for deterministic tests
        """
        self.catalog = catalog if catalog is not None else QuoteCatalog.default()
        self._rng = rng or random.Random()

    def get_default_message(self) -> str:
        """Return the placeholder shown before any quote is generated."""
        return DEFAULT_MESSAGE

    def generate_quote(self) -> str:
        """
        Pick one quote uniformly at random.

        Draws are made with replacement, so the same quote may come up
        on consecutive calls.

        Returns:
            A quote from the catalog

        Raises:
            EmptyCatalogError: If the catalog holds no quotes
        """
        if not self.catalog:
            raise EmptyCatalogError()

        index = self._rng.randrange(len(self.catalog))
        quote = self.catalog[index]
        logger.debug(f"Generated quote #{index}")
        return quote
