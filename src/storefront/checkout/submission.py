"""Checkout submission: command and handler.

Clears the cart only after the payment gateway has handed back a checkout
URL. Any failure leaves the cart exactly as it was.
"""

from protean import handle
from protean.fields import Identifier

from storefront.cart.cart import Cart
from storefront.cart.store import LineItemStore
from storefront.checkout import get_submitter
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class SubmitCheckout:
    session_id = Identifier(required=True)
    request_id = Identifier()  # Idempotency key for the gateway; generated when absent


@storefront.command_handler(part_of=Cart)
class SubmitCheckoutHandler:
    @handle(SubmitCheckout)
    def submit_checkout(self, command):
        store = LineItemStore.open(str(command.session_id))
        session = get_submitter().submit(store.cart, request_id=command.request_id)
        store.clear_cart()
        return {
            "checkout_url": session.checkout_url,
            "request_id": session.request_id,
        }
