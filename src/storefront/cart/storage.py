"""Durable side-store for carts, keyed by browsing session."""

from abc import ABC, abstractmethod

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart


class CartStorage(ABC):
    @abstractmethod
    def save(self, cart: Cart) -> None: ...

    @abstractmethod
    def load(self, session_id: str) -> Cart | None: ...

    @abstractmethod
    def erase(self, session_id: str) -> None: ...


class RepositoryCartStorage(CartStorage):
    """Keeps carts in the domain repository configured for ``Cart``.

    Carts saved or loaded through this storage are remembered per session, so
    erasing deletes that same instance. Querying again would swap the unit of
    work's copy for a fresh one and lose the events still pending on it.
    """

    def __init__(self):
        self._carts: dict[str, Cart] = {}

    def _records(self, session_id):
        repo = current_domain.repository_for(Cart)
        return repo, repo._dao.query.filter(session_id=session_id).all().items

    def save(self, cart: Cart) -> None:
        current_domain.repository_for(Cart).add(cart)
        self._carts[cart.session_id] = cart

    def load(self, session_id: str) -> Cart | None:
        repo, records = self._records(session_id)
        if not records:
            return None
        cart = repo.get(records[0].id)
        self._carts[session_id] = cart
        return cart

    def erase(self, session_id: str) -> None:
        cart = self._carts.pop(session_id, None)
        if cart is not None:
            current_domain.repository_for(Cart)._dao.delete(cart)
            return

        repo, records = self._records(session_id)
        for record in records:
            repo._dao.delete(record)
