"""Catalogue service factory.

Provides get_catalogue() / set_catalogue() to swap implementations. The
default is an empty InMemoryCatalogue that tests and local setups fill in.
"""

from storefront.catalogue.memory_adapter import InMemoryCatalogue
from storefront.catalogue.port import CatalogueService, Product, ProductKind

__all__ = [
    "CatalogueService",
    "InMemoryCatalogue",
    "Product",
    "ProductKind",
    "get_catalogue",
    "reset_catalogue",
    "set_catalogue",
]

_current_catalogue: CatalogueService | None = None


def get_catalogue() -> CatalogueService:
    """Return the current catalogue. Defaults to InMemoryCatalogue."""
    global _current_catalogue
    if _current_catalogue is None:
        _current_catalogue = InMemoryCatalogue()
    return _current_catalogue


def set_catalogue(catalogue: CatalogueService) -> None:
    """Override the active catalogue (useful for tests)."""
    global _current_catalogue
    _current_catalogue = catalogue


def reset_catalogue() -> None:
    """Reset to default catalogue."""
    global _current_catalogue
    _current_catalogue = None
