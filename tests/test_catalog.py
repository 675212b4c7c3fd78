# =============================================================================
# tests/test_catalog.py - Quote Catalog Tests
# =============================================================================

import pytest

from app.exceptions import EmptyCatalogError
from core.models import DEFAULT_QUOTES, QuoteCatalog


class TestDefaultCatalog:
    """Tests for the built-in catalog."""

    def test_has_five_quotes(self):
        assert len(QuoteCatalog.default()) == 5

    def test_order_is_preserved(self, expected_quotes):
        assert list(QuoteCatalog.default()) == expected_quotes

    def test_indexing(self):
        catalog = QuoteCatalog.default()
        assert catalog[0] == "Believe you can and you're halfway there."
        assert catalog[-1] == "The best way to predict the future is to invent it."

    def test_membership(self):
        catalog = QuoteCatalog.default()
        assert "The only way to do great work is to love what you do." in catalog
        assert "Not a real quote." not in catalog

    def test_default_catalog_is_not_empty(self):
        # Should not raise
        QuoteCatalog.default().ensure_not_empty()


class TestCatalogImmutability:
    """The catalog cannot be changed after construction."""

    def test_quotes_is_a_tuple(self):
        assert isinstance(QuoteCatalog.default().quotes, tuple)

    def test_no_item_assignment(self):
        catalog = QuoteCatalog.default()
        with pytest.raises(TypeError):
            catalog[0] = "changed"

    def test_source_list_changes_do_not_leak(self):
        source = ["one", "two"]
        catalog = QuoteCatalog(source)
        source.append("three")
        assert len(catalog) == 2

    def test_cannot_add_attributes(self):
        catalog = QuoteCatalog.default()
        with pytest.raises(AttributeError):
            catalog.extra = ["more"]

    def test_default_quotes_constant_unchanged(self):
        QuoteCatalog.default()
        assert len(DEFAULT_QUOTES) == 5


class TestEmptyCatalog:
    """An empty catalog can be built but not drawn from."""

    def test_empty_catalog_constructs(self):
        assert len(QuoteCatalog([])) == 0

    def test_ensure_not_empty_raises(self):
        with pytest.raises(EmptyCatalogError) as exc_info:
            QuoteCatalog([]).ensure_not_empty()

        assert exc_info.value.code == "EMPTY_CATALOG"
        assert exc_info.value.status_code == 500

    def test_error_dict_has_suggestion(self):
        error = EmptyCatalogError()
        body = error.to_dict()
        assert body["code"] == "EMPTY_CATALOG"
        assert "suggestion" in body
        assert body["details"] == {"quote_count": 0}
