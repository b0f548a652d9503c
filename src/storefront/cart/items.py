"""Cart item management: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from storefront.cart.cart import Cart
from storefront.cart.store import LineItemStore
from storefront.catalogue import get_catalogue
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class AddToCart:
    session_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class UpdateCartItem:
    session_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    session_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command(part_of="Cart")
class ClearCart:
    session_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = get_catalogue().get_product(command.product_id)
        store = LineItemStore.open(str(command.session_id))
        item = store.add_item(product, command.quantity)
        return str(item.id)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        store = LineItemStore.open(str(command.session_id))
        store.update_item(command.item_id, command.quantity)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        store = LineItemStore.open(str(command.session_id))
        store.remove_item(command.item_id)

    @handle(ClearCart)
    def clear_cart(self, command):
        store = LineItemStore.open(str(command.session_id))
        store.clear_cart()
