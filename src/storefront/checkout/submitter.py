"""Checkout submitter: hands a finished cart to the payment gateway.

The submitter refuses carts with pending registrations even though the
storefront already routes shoppers through the registration forms first: the
cart widget and the checkout page both lead here, and neither is the only
gate. It never touches the cart; the caller clears it once a checkout URL
comes back.
"""

from dataclasses import dataclass
from uuid import uuid4

import structlog
from payments.gateway import get_gateway
from payments.gateway.port import GatewayUnavailableError, OrderLine, OrderPayload, PaymentGateway
from protean.exceptions import ValidationError

from storefront.cart.navigation import NavigationDecisionEngine
from storefront.cart.registration import RegistrationStatusResolver
from storefront.checkout.settings import CheckoutSettings
from storefront.exceptions import (
    CheckoutInProgressError,
    PaymentCollaboratorError,
    RegistrationRequiredError,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutSession:
    checkout_url: str
    session_id: str | None
    request_id: str


def build_order_payload(cart) -> OrderPayload:
    return OrderPayload(
        items=[
            OrderLine(
                product_id=str(item.product_id),
                quantity=item.quantity,
                registration_data=item.registration_data.to_dict() if item.registration_data else None,
                name=item.product.name,
                unit_price=item.product.price,
            )
            for item in cart.ordered_items
        ]
    )


class CheckoutSubmitter:
    def __init__(self, gateway: PaymentGateway | None = None, settings: CheckoutSettings | None = None):
        self._gateway = gateway
        self.settings = settings or CheckoutSettings.from_env()
        self._in_flight: set[str] = set()

    @property
    def gateway(self) -> PaymentGateway:
        return self._gateway or get_gateway()

    def submit(self, cart, request_id: str | None = None) -> CheckoutSession:
        resolver = RegistrationStatusResolver(cart)
        if resolver.any_pending():
            next_action = NavigationDecisionEngine(resolver).next_action()
            logger.info(
                "Checkout blocked by pending registrations",
                cart_id=str(cart.id),
                next_item_id=next_action.item_id,
            )
            raise RegistrationRequiredError(resolver.pending_item_ids(), next_action)

        if not cart.items:
            raise ValidationError({"cart": ["Cannot check out an empty cart"]})

        cart_key = str(cart.id)
        if cart_key in self._in_flight:
            raise CheckoutInProgressError(f"Checkout already in progress for cart {cart_key}")

        request_id = request_id or str(uuid4())
        order = build_order_payload(cart)

        self._in_flight.add(cart_key)
        try:
            result = self.gateway.create_checkout_session(
                order,
                success_url=self.settings.success_url,
                cancel_url=self.settings.cancel_url,
                currency=self.settings.currency,
                idempotency_key=request_id,
            )
        except GatewayUnavailableError as exc:
            logger.warning("Payment gateway unavailable", cart_id=cart_key, request_id=request_id, error=str(exc))
            raise PaymentCollaboratorError(f"Payment gateway unavailable: {exc}") from exc
        finally:
            self._in_flight.discard(cart_key)

        if not result.success:
            logger.warning(
                "Payment gateway rejected checkout",
                cart_id=cart_key,
                request_id=request_id,
                reason=result.failure_reason,
            )
            raise PaymentCollaboratorError(result.failure_reason or "Payment gateway rejected the checkout")

        if not result.checkout_url:
            raise PaymentCollaboratorError("Payment gateway did not return a checkout URL")

        logger.info(
            "Checkout session created",
            cart_id=cart_key,
            request_id=request_id,
            gateway_session_id=result.session_id,
        )
        return CheckoutSession(
            checkout_url=result.checkout_url,
            session_id=result.session_id,
            request_id=request_id,
        )
