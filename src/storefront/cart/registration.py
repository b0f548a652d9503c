"""Registration status of the line items in a cart.

Vendor spots and volunteer shifts cannot be paid for until their registration
form has been filled in. Everything here is derived from the cart on every
call; nothing is cached.
"""

from enum import Enum

from storefront.catalogue.port import ProductKind

# Vendor registration is always handled before volunteer registration.
REGISTRATION_PRIORITY = (ProductKind.VENDOR_SPOT, ProductKind.VOLUNTEER_SHIFT)

# Short names used by the cart widget for each registrable kind
REGISTRATION_TYPE_KINDS = {
    "vendor": ProductKind.VENDOR_SPOT,
    "volunteer": ProductKind.VOLUNTEER_SHIFT,
}


class RegistrationStatus(Enum):
    PENDING = "pending"
    COMPLETE = "complete"
    NONE = "none"


def _kind_value(kind):
    return kind.value if isinstance(kind, ProductKind) else kind


class RegistrationStatusResolver:
    """Answers registration questions about a single cart."""

    def __init__(self, cart):
        self.cart = cart

    def status_for(self, item_id) -> RegistrationStatus:
        item = self.cart.find_item(item_id)
        if item is None or not item.is_registrable:
            return RegistrationStatus.NONE
        return RegistrationStatus.COMPLETE if item.registration_data else RegistrationStatus.PENDING

    def pending_items_of_kind(self, kind, excluding=None) -> list:
        """Pending items of one registrable kind, in cart order."""
        kind = _kind_value(kind)
        return [
            item
            for item in self.cart.ordered_items
            if item.kind == kind
            and (excluding is None or str(item.id) != str(excluding))
            and self.status_for(item.id) == RegistrationStatus.PENDING
        ]

    def any_pending(self, excluding=None) -> bool:
        return any(self.pending_items_of_kind(kind, excluding) for kind in REGISTRATION_PRIORITY)

    def pending_item_ids(self, excluding=None) -> list[str]:
        return [str(item.id) for kind in REGISTRATION_PRIORITY for item in self.pending_items_of_kind(kind, excluding)]

    def has_item_of_kind(self, kind) -> bool:
        kind = _kind_value(kind)
        return any(item.kind == kind for item in self.cart.items)

    def has_registration_type(self, registration_type) -> bool:
        """True if the cart holds anything needing a "vendor" or "volunteer" registration."""
        kind = REGISTRATION_TYPE_KINDS.get(registration_type)
        if kind is None:
            return False
        return self.has_item_of_kind(kind)
