"""Line item store: one session's cart plus its persistence.

The store is constructed explicitly per session and handed to whoever needs
the cart. Every mutation is written to durable storage right away; a failed
write is logged and the in-memory cart stays authoritative.
"""

import structlog

from storefront.cart.cart import Cart
from storefront.cart.navigation import NavigationDecisionEngine
from storefront.cart.registration import RegistrationStatusResolver
from storefront.cart.storage import CartStorage, RepositoryCartStorage

logger = structlog.get_logger(__name__)


class LineItemStore:
    def __init__(self, cart: Cart, storage: CartStorage):
        self.cart = cart
        self.storage = storage

    @classmethod
    def open(cls, session_id: str, storage: CartStorage | None = None) -> "LineItemStore":
        """Load the session's cart, or start an empty one."""
        storage = storage or RepositoryCartStorage()
        cart = storage.load(session_id)
        if cart is None:
            logger.debug("Starting new cart", session_id=session_id)
            cart = Cart.create(session_id=session_id)
        return cls(cart, storage)

    @property
    def session_id(self) -> str:
        return self.cart.session_id

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    @property
    def total(self) -> float:
        return self.cart.total

    @property
    def resolver(self) -> RegistrationStatusResolver:
        return RegistrationStatusResolver(self.cart)

    @property
    def navigation(self) -> NavigationDecisionEngine:
        return NavigationDecisionEngine(self.resolver)

    def has_item_of_kind(self, kind) -> bool:
        return self.resolver.has_item_of_kind(kind)

    def has_registration_type(self, registration_type) -> bool:
        return self.resolver.has_registration_type(registration_type)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_item(self, product, quantity=1):
        item = self.cart.add_item(product, quantity)
        self._persist()
        logger.info(
            "Added to cart",
            session_id=self.session_id,
            item_id=str(item.id),
            product_id=str(product.id),
            quantity=quantity,
        )
        return item

    def update_item(self, item_id, quantity):
        self.cart.update_item(item_id, quantity)
        self._persist()

    def remove_item(self, item_id):
        self.cart.remove_item(item_id)
        self._persist()

    def set_registration_data(self, item_id, data):
        self.cart.set_registration_data(item_id, data)
        self._persist()

    def clear_cart(self):
        self.cart.clear()
        # The emptied cart is saved once so CartCleared reaches the event store
        self._persist()
        try:
            self.storage.erase(self.session_id)
        except Exception as exc:
            logger.warning("Failed to erase stored cart", session_id=self.session_id, error=str(exc))
        self.cart = Cart.create(session_id=self.session_id)

    # -------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------
    def _persist(self):
        try:
            self.storage.save(self.cart)
        except Exception as exc:
            logger.warning(
                "Failed to persist cart, keeping in-memory state",
                session_id=self.session_id,
                error=str(exc),
            )
