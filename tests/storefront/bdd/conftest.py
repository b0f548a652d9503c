"""Shared BDD fixtures and step definitions for the Storefront registration gate."""

import pytest
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers
from storefront.cart.cart import Cart, VolunteerRegistration
from storefront.catalogue import ProductKind, get_catalogue


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


@pytest.fixture()
def outcome():
    """Container for the result of the When step."""
    return {"value": None}


@given("an empty cart", target_fixture="cart")
def empty_cart():
    return Cart.create(session_id="sess-bdd-001")


@given(parsers.cfparse('a "{product_id}" is in the cart with quantity {qty:d}'))
def product_in_cart(cart, product_id, qty, error):
    try:
        cart.add_item(get_catalogue().get_product(product_id), qty)
    except ValidationError as exc:
        error["exc"] = exc


@given(parsers.cfparse('the "{product_id}" registration has been filled in'))
def registration_filled_in(cart, product_id, vendor_registration):
    item = cart.find_item_for_product(product_id)
    answers = {
        ProductKind.VENDOR_SPOT.value: vendor_registration,
        ProductKind.VOLUNTEER_SHIFT.value: VolunteerRegistration(
            skills="Setup and teardown",
            availability_notes="All weekend",
        ),
    }
    cart.set_registration_data(item.id, answers[item.kind])
