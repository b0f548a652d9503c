"""Checkout submitter factory.

One submitter per process, so its in-flight guard covers every request.
"""

from storefront.checkout.submitter import CheckoutSubmitter

_current_submitter: CheckoutSubmitter | None = None


def get_submitter() -> CheckoutSubmitter:
    global _current_submitter
    if _current_submitter is None:
        _current_submitter = CheckoutSubmitter()
    return _current_submitter


def reset_submitter() -> None:
    global _current_submitter
    _current_submitter = None
