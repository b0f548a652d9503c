"""Checkout errors raised by the storefront.

Malformed requests use Protean's ``ValidationError``; the errors below cover
the checkout paths that need their own handling by the caller.
"""


class CheckoutError(Exception):
    """Base class for checkout failures."""


class RegistrationRequiredError(CheckoutError):
    """Checkout was attempted while registrations are still pending."""

    def __init__(self, pending_item_ids, next_action):
        self.pending_item_ids = list(pending_item_ids)
        self.next_action = next_action
        super().__init__(f"Registration required for {len(self.pending_item_ids)} item(s) before checkout")


class PaymentCollaboratorError(CheckoutError):
    """The payment gateway failed or answered with something unusable.

    The cart is left untouched, so the shopper can simply try again.
    """

    retryable = True


class CheckoutInProgressError(CheckoutError):
    """A checkout for the same cart has not finished yet."""
