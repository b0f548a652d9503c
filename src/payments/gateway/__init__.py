"""Hosted-checkout gateway used by the storefront.

The active adapter is process-wide. Nothing talks to a real provider yet, so
the default is a FakeGateway; tests and local setups swap it with
set_gateway() and go back to the default with reset_gateway().
"""

from payments.gateway.fake_adapter import FakeGateway
from payments.gateway.port import (
    CheckoutSessionResult,
    GatewayUnavailableError,
    OrderLine,
    OrderPayload,
    PaymentGateway,
)

__all__ = [
    "CheckoutSessionResult",
    "FakeGateway",
    "GatewayUnavailableError",
    "OrderLine",
    "OrderPayload",
    "PaymentGateway",
    "get_gateway",
    "reset_gateway",
    "set_gateway",
]

_active: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    global _active
    if _active is None:
        _active = FakeGateway()
    return _active


def set_gateway(gateway: PaymentGateway) -> None:
    global _active
    _active = gateway


def reset_gateway() -> None:
    global _active
    _active = None
