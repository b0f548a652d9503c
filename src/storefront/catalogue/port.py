"""Catalogue port (abstract interface).

The storefront only reads from the catalogue: it looks a product up once,
when the product is added to a cart, and snapshots what it needs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class ProductKind(Enum):
    TICKET = "ticket"
    MERCHANDISE = "merchandise"
    VENDOR_SPOT = "vendor_spot"
    VOLUNTEER_SHIFT = "volunteer_shift"


@dataclass(frozen=True)
class Product:
    """Display and price data of a catalogue entry."""

    id: str
    name: str
    price: float
    kind: str
    image_url: str | None = None


class CatalogueService(ABC):
    """Abstract catalogue interface."""

    @abstractmethod
    def get_product(self, product_id: str) -> Product:
        """Return the product, or raise ObjectNotFoundError."""
        ...
