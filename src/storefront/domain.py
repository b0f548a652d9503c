"""Storefront bounded context: Cart & Registration Gate.

Holds the shopping cart of a browsing session, decides whether vendor or
volunteer registrations must be completed before payment, and submits the
finished cart to the payment collaborator.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

configure_logging()

# Domain Composition Root
storefront = Domain(name="storefront")
