"""Payment gateway port (abstract interface).

Defines the contract that hosted-checkout adapters must implement. The
storefront hands over an order and gets back the URL of the provider's
payment page; it does not interpret payment state beyond that.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class GatewayUnavailableError(Exception):
    """The gateway could not be reached or answered with a transport error."""


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    quantity: int
    registration_data: dict | None = None
    name: str | None = None
    unit_price: float | None = None


@dataclass(frozen=True)
class OrderPayload:
    items: list[OrderLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "items": [
                {
                    "productId": line.product_id,
                    "quantity": line.quantity,
                    "registrationData": line.registration_data,
                }
                for line in self.items
            ]
        }


@dataclass(frozen=True)
class CheckoutSessionResult:
    """Result of a checkout session request."""

    success: bool
    checkout_url: str | None = None
    session_id: str | None = None
    failure_reason: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def create_checkout_session(
        self,
        order: OrderPayload,
        success_url: str,
        cancel_url: str,
        currency: str,
        idempotency_key: str,
    ) -> CheckoutSessionResult:
        """Open a hosted checkout session for the order.

        Repeating a call with the same idempotency key must not create a
        second session.
        """
        ...
