"""In-memory catalogue for development and testing."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.port import CatalogueService, Product


class InMemoryCatalogue(CatalogueService):
    def __init__(self, products: list[Product] | None = None) -> None:
        self.products: dict[str, Product] = {}
        for product in products or []:
            self.register(product)

    def register(self, product: Product) -> None:
        self.products[str(product.id)] = product

    def get_product(self, product_id: str) -> Product:
        try:
            return self.products[str(product_id)]
        except KeyError:
            raise ObjectNotFoundError(f"Product {product_id} not found in catalogue") from None
