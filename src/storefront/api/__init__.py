"""Storefront domain API package."""

from storefront.api.errors import register_checkout_exception_handlers
from storefront.api.routes import cart_router

__all__ = ["cart_router", "register_checkout_exception_handlers"]
