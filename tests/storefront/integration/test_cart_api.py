"""Integration tests for the cart, registration and checkout endpoints via TestClient."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from payments.gateway import get_gateway
from protean.integrations.fastapi import register_exception_handlers
from storefront.api import cart_router, register_checkout_exception_handlers
from storefront.cart.store import LineItemStore

SESSION = "sess-api-001"


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(cart_router)
    register_exception_handlers(app)
    register_checkout_exception_handlers(app)
    return TestClient(app)


def _add_item(client, product_id, quantity=1):
    """Helper: POST /carts/{session_id}/items and return the item_id."""
    response = client.post(f"/carts/{SESSION}/items", json={"product_id": product_id, "quantity": quantity})
    assert response.status_code == 201
    return response.json()["item_id"]


def _register_vendor(client, item_id, form):
    return client.put(f"/carts/{SESSION}/items/{item_id}/vendor-registration", json=form)


class TestCartEndpoints:
    def test_empty_cart_summary(self, client):
        response = client.get(f"/carts/{SESSION}")
        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["item_count"] == 0
        assert data["next_action"]["action"] == "checkout"

    def test_add_item_confirmation(self, client):
        response = client.post(f"/carts/{SESSION}/items", json={"product_id": "merch-001", "quantity": 2})
        assert response.status_code == 201
        assert response.json()["message"] == "Festival T-Shirt added to your cart."

    def test_summary_lists_items_with_status(self, client):
        _add_item(client, "ticket-001", 2)
        vendor_id = _add_item(client, "vendor-001")

        data = client.get(f"/carts/{SESSION}").json()

        assert data["item_count"] == 3
        assert data["total"] == pytest.approx(105.0)
        assert [i["registration_status"] for i in data["items"]] == ["none", "pending"]
        assert data["next_action"]["path"] == f"/registration/vendor/{vendor_id}"

    def test_quantity_defaults_to_one(self, client):
        client.post(f"/carts/{SESSION}/items", json={"product_id": "ticket-001"})
        assert client.get(f"/carts/{SESSION}").json()["item_count"] == 1

    def test_zero_quantity_is_rejected(self, client):
        response = client.post(f"/carts/{SESSION}/items", json={"product_id": "ticket-001", "quantity": 0})
        assert response.status_code == 422

    def test_unknown_product_is_404(self, client):
        response = client.post(f"/carts/{SESSION}/items", json={"product_id": "nope", "quantity": 1})
        assert response.status_code == 404

    def test_update_item(self, client):
        item_id = _add_item(client, "ticket-001")
        response = client.put(f"/carts/{SESSION}/items/{item_id}", json={"quantity": 6})
        assert response.status_code == 200
        assert LineItemStore.open(SESSION).item_count == 6

    def test_remove_item(self, client):
        item_id = _add_item(client, "ticket-001")
        response = client.delete(f"/carts/{SESSION}/items/{item_id}")
        assert response.status_code == 200
        assert LineItemStore.open(SESSION).item_count == 0

    def test_remove_unknown_item_is_ok(self, client):
        response = client.delete(f"/carts/{SESSION}/items/unknown-item")
        assert response.status_code == 200

    def test_clear_cart(self, client):
        _add_item(client, "ticket-001")
        _add_item(client, "merch-001")
        response = client.delete(f"/carts/{SESSION}")
        assert response.status_code == 200
        assert client.get(f"/carts/{SESSION}").json()["items"] == []


class TestRegistrationEndpoints:
    def test_vendor_registration_moves_to_volunteer(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        volunteer_id = _add_item(client, "volunteer-001")

        response = _register_vendor(client, vendor_id, vendor_form)

        assert response.status_code == 200
        data = response.json()
        assert data["action"] == "register"
        assert data["item_id"] == volunteer_id
        assert data["path"] == f"/registration/volunteer/{volunteer_id}"

    def test_volunteer_registration_moves_to_checkout(self, client):
        volunteer_id = _add_item(client, "volunteer-001")
        response = client.put(
            f"/carts/{SESSION}/items/{volunteer_id}/volunteer-registration",
            json={"skills": "Forklift certified", "availability_notes": "Sunday morning"},
        )
        assert response.status_code == 200
        assert response.json()["action"] == "checkout"

    def test_registration_for_wrong_kind_is_400(self, client, vendor_form):
        ticket_id = _add_item(client, "ticket-001")
        response = _register_vendor(client, ticket_id, vendor_form)
        assert response.status_code == 400

    def test_missing_required_field_is_422(self, client):
        vendor_id = _add_item(client, "vendor-001")
        response = client.put(
            f"/carts/{SESSION}/items/{vendor_id}/vendor-registration",
            json={"business_name": "No Description Co"},
        )
        assert response.status_code == 422

    def test_missing_email_is_422(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        del vendor_form["email"]
        response = _register_vendor(client, vendor_id, vendor_form)
        assert response.status_code == 422

    def test_malformed_email_is_400(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        vendor_form["email"] = "sam at riverbend"
        response = _register_vendor(client, vendor_id, vendor_form)
        assert response.status_code == 400
        assert "email" in response.json()["error"]

    def test_short_phone_number_is_400(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        vendor_form["phone_number"] = "555-0142"
        response = _register_vendor(client, vendor_id, vendor_form)
        assert response.status_code == 400
        assert "phone_number" in response.json()["error"]

    def test_terms_not_accepted_is_400(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        vendor_form["agree_to_terms"] = False
        response = _register_vendor(client, vendor_id, vendor_form)
        assert response.status_code == 400
        assert client.get(f"/carts/{SESSION}").json()["items"][0]["registration_status"] == "pending"

    def test_vendor_form_for_unknown_item_is_404(self, client, vendor_form):
        _add_item(client, "vendor-001")
        response = _register_vendor(client, "not-in-cart", vendor_form)
        assert response.status_code == 404

    def test_volunteer_form_for_unknown_item_is_404(self, client):
        response = client.put(
            f"/carts/{SESSION}/items/not-in-cart/volunteer-registration",
            json={"availability_notes": "Sunday morning"},
        )
        assert response.status_code == 404

    def test_reopen_unknown_item_is_404(self, client):
        response = client.delete(f"/carts/{SESSION}/items/not-in-cart/registration")
        assert response.status_code == 404

    def test_reopen_registration(self, client, vendor_form):
        vendor_id = _add_item(client, "vendor-001")
        _register_vendor(client, vendor_id, vendor_form)

        response = client.delete(f"/carts/{SESSION}/items/{vendor_id}/registration")

        assert response.status_code == 200
        assert response.json()["item_id"] == vendor_id

    def test_next_action_excluding(self, client):
        vendor_id = _add_item(client, "vendor-001")
        volunteer_id = _add_item(client, "volunteer-001")

        assert client.get(f"/carts/{SESSION}/next-action").json()["item_id"] == vendor_id
        excluded = client.get(f"/carts/{SESSION}/next-action", params={"excluding": vendor_id}).json()
        assert excluded["item_id"] == volunteer_id


class TestCheckoutEndpoint:
    def test_checkout_returns_url_and_clears_cart(self, client):
        _add_item(client, "ticket-001", 2)

        response = client.post(f"/carts/{SESSION}/checkout", json={"request_id": "req-api-1"})

        assert response.status_code == 201
        data = response.json()
        assert data["checkout_url"].startswith("https://checkout.example.test/pay/")
        assert data["request_id"] == "req-api-1"
        assert client.get(f"/carts/{SESSION}").json()["item_count"] == 0

    def test_checkout_without_body(self, client):
        _add_item(client, "merch-001")
        response = client.post(f"/carts/{SESSION}/checkout")
        assert response.status_code == 201

    def test_pending_registration_is_409(self, client):
        _add_item(client, "ticket-001")
        vendor_id = _add_item(client, "vendor-001")

        response = client.post(f"/carts/{SESSION}/checkout")

        assert response.status_code == 409
        data = response.json()
        assert data["pending_item_ids"] == [vendor_id]
        assert data["next_action"]["path"] == f"/registration/vendor/{vendor_id}"
        assert client.get(f"/carts/{SESSION}").json()["item_count"] == 2

    def test_empty_cart_is_400(self, client):
        response = client.post(f"/carts/{SESSION}/checkout")
        assert response.status_code == 400

    def test_gateway_failure_is_502(self, client):
        _add_item(client, "ticket-001")
        get_gateway().configure(should_succeed=False, failure_reason="Payouts not enabled")

        response = client.post(f"/carts/{SESSION}/checkout")

        assert response.status_code == 502
        assert response.json()["retryable"] is True
        assert client.get(f"/carts/{SESSION}").json()["item_count"] == 1
