"""Configurable fake payment gateway for development and testing.

This adapter simulates a hosted checkout provider without any external calls.
It can be configured at runtime to succeed, decline, or be unreachable, and it
honours idempotency keys the way a real provider does: a repeated key returns
the session created the first time.
"""

from uuid import uuid4

from payments.gateway.port import (
    CheckoutSessionResult,
    GatewayUnavailableError,
    OrderPayload,
    PaymentGateway,
)


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, base_url: str = "https://checkout.example.test/pay") -> None:
        self.base_url = base_url
        self.should_succeed: bool = True
        self.unavailable: bool = False
        self.failure_reason: str = "Checkout session rejected"
        self.calls: list[dict] = []
        self.sessions: dict[str, CheckoutSessionResult] = {}

    def configure(
        self,
        should_succeed: bool,
        failure_reason: str = "Checkout session rejected",
        unavailable: bool = False,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.unavailable = unavailable

    def create_checkout_session(
        self,
        order: OrderPayload,
        success_url: str,
        cancel_url: str,
        currency: str,
        idempotency_key: str,
    ) -> CheckoutSessionResult:
        call = {
            "method": "create_checkout_session",
            "order": order.to_dict(),
            "success_url": success_url,
            "cancel_url": cancel_url,
            "currency": currency,
            "idempotency_key": idempotency_key,
        }
        self.calls.append(call)

        if self.unavailable:
            raise GatewayUnavailableError("Fake gateway is configured as unreachable")

        if idempotency_key in self.sessions:
            return self.sessions[idempotency_key]

        if not self.should_succeed:
            return CheckoutSessionResult(success=False, failure_reason=self.failure_reason)

        session_id = f"fake_cs_{uuid4().hex[:12]}"
        result = CheckoutSessionResult(
            success=True,
            checkout_url=f"{self.base_url}/{session_id}",
            session_id=session_id,
        )
        self.sessions[idempotency_key] = result
        return result
