"""Checkout settings read from the environment."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutSettings:
    success_url: str
    cancel_url: str
    currency: str

    @classmethod
    def from_env(cls) -> "CheckoutSettings":
        return cls(
            success_url=os.getenv("CHECKOUT_SUCCESS_URL", "http://localhost:3000/checkout?success=true"),
            cancel_url=os.getenv("CHECKOUT_CANCEL_URL", "http://localhost:3000/checkout?cancelled=true"),
            currency=os.getenv("CHECKOUT_CURRENCY", "usd").lower(),
        )
