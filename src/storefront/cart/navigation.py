"""Where to send the shopper when they leave the cart.

The decision is a pure function of the cart: the first pending vendor spot,
then the first pending volunteer shift, and otherwise checkout.
"""

from dataclasses import dataclass

from storefront.cart.registration import REGISTRATION_PRIORITY, RegistrationStatusResolver
from storefront.catalogue.port import ProductKind

REGISTER = "register"
CHECKOUT = "checkout"

_REGISTRATION_ROUTES = {
    ProductKind.VENDOR_SPOT.value: "/registration/vendor",
    ProductKind.VOLUNTEER_SHIFT.value: "/registration/volunteer",
}

_REGISTRATION_MESSAGES = {
    ProductKind.VENDOR_SPOT.value: "Complete your vendor registration before checkout.",
    ProductKind.VOLUNTEER_SHIFT.value: "Complete your volunteer registration before checkout.",
}


@dataclass(frozen=True)
class NextAction:
    action: str
    item_id: str | None = None
    kind: str | None = None

    @property
    def path(self) -> str:
        if self.action == REGISTER:
            return f"{_REGISTRATION_ROUTES[self.kind]}/{self.item_id}"
        return "/checkout"

    @property
    def message(self) -> str:
        if self.action == REGISTER:
            return _REGISTRATION_MESSAGES[self.kind]
        return "All registrations are complete. You can proceed to checkout."

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "item_id": self.item_id,
            "kind": self.kind,
            "path": self.path,
            "message": self.message,
        }


class NavigationDecisionEngine:
    def __init__(self, resolver: RegistrationStatusResolver):
        self.resolver = resolver

    @classmethod
    def for_cart(cls, cart):
        return cls(RegistrationStatusResolver(cart))

    def next_action(self, excluding=None) -> NextAction:
        for kind in REGISTRATION_PRIORITY:
            pending = self.resolver.pending_items_of_kind(kind, excluding)
            if pending:
                return NextAction(action=REGISTER, item_id=str(pending[0].id), kind=kind.value)
        return NextAction(action=CHECKOUT)
