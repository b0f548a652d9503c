"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class LineItemAdded:
    """A product was added to the cart, or its quantity was topped up."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class LineItemQuantityUpdated:
    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class LineItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCleared:
    """Every line item was dropped, usually after checkout was acknowledged."""

    __version__ = 1

    cart_id = Identifier(required=True)
    items_removed_count = Integer(required=True)


@storefront.event(part_of="Cart")
class RegistrationCompleted:
    """Registration details were supplied for a vendor spot or volunteer shift."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    kind = String(required=True, max_length=50)


@storefront.event(part_of="Cart")
class RegistrationReopened:
    """Registration details were withdrawn so the form can be filled in again."""

    __version__ = 1

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    kind = String(required=True, max_length=50)
