# =============================================================================
# core/models/catalog.py - Quote Catalog
# =============================================================================
# The fixed, ordered set of quotes the service draws from.
# A catalog is built once at startup and never mutated afterwards.
# =============================================================================

from collections.abc import Iterable, Iterator, Sequence

from app.exceptions import EmptyCatalogError


DEFAULT_QUOTES: tuple[str, ...] = (
    "Believe you can and you're halfway there.",
    "The only way to do great work is to love what you do.",
    "Life is what happens when you're busy making other plans.",
    "Don't watch the clock; do what it does. Keep going.",
    "The best way to predict the future is to invent it.",
)


class QuoteCatalog(Sequence):
    """
    Read-only ordered sequence of quote strings.

    Supports len(), indexing, iteration and membership like a tuple.
    There are no mutation methods.

    Example:
        catalog = QuoteCatalog.default()
        len(catalog)  # 5
        catalog[0]    # "Believe you can and you're halfway there."
    """

    __slots__ = ("_quotes",)

    def __init__(self, quotes: Iterable[str]):
        self._quotes = tuple(quotes)

    @classmethod
    def default(cls) -> "QuoteCatalog":
        """Build the catalog of built-in motivational quotes."""
        return cls(DEFAULT_QUOTES)

    def __getitem__(self, index):
        return self._quotes[index]

    def __len__(self) -> int:
        return len(self._quotes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._quotes)

    def __contains__(self, quote: object) -> bool:
        return quote in self._quotes

    def __repr__(self) -> str:
        return f"QuoteCatalog({len(self._quotes)} quotes)"

    @property
    def quotes(self) -> tuple[str, ...]:
        """The underlying quotes as a tuple."""
        return self._quotes

    def ensure_not_empty(self) -> None:
        """
        Check the catalog can be drawn from.

        Raises:
            EmptyCatalogError: If the catalog holds no quotes
        """
        if not self._quotes:
            raise EmptyCatalogError()
