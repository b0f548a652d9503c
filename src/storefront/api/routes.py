"""FastAPI routes for the Storefront domain: carts, registrations and checkout."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddToCartRequest,
    CartSummaryResponse,
    CheckoutRequest,
    CheckoutResponse,
    ItemAddedResponse,
    LineItemResponse,
    NextActionResponse,
    StatusResponse,
    UpdateCartItemRequest,
    VendorRegistrationRequest,
    VolunteerRegistrationRequest,
)
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart, UpdateCartItem
from storefront.cart.registration_forms import (
    RecordVendorRegistration,
    RecordVolunteerRegistration,
    ReopenRegistration,
)
from storefront.cart.store import LineItemStore
from storefront.checkout.submission import SubmitCheckout
from storefront.utils.logging import add_context, clear_context


def _bind_session(session_id: str) -> None:
    """Tag every log line of the request with the cart's session."""
    clear_context()
    add_context(session_id=session_id)


def _require_item(session_id: str, item_id: str) -> None:
    """Form routes answer 404 for items the cart does not hold."""
    if LineItemStore.open(session_id).cart.find_item(item_id) is None:
        raise ObjectNotFoundError(f"Item {item_id} is not in the cart")


def _next_action_response(next_action) -> NextActionResponse:
    return NextActionResponse(**next_action.to_dict())


def _cart_summary(store: LineItemStore) -> CartSummaryResponse:
    resolver = store.resolver
    items = [
        LineItemResponse(
            item_id=str(item.id),
            product_id=str(item.product_id),
            name=item.product.name,
            kind=item.kind,
            price=item.product.price,
            image_url=item.product.image_url,
            quantity=item.quantity,
            line_total=item.line_total,
            registration_status=resolver.status_for(item.id).value,
        )
        for item in store.cart.ordered_items
    ]
    return CartSummaryResponse(
        session_id=store.session_id,
        items=items,
        item_count=store.item_count,
        total=store.total,
        next_action=_next_action_response(store.navigation.next_action()),
    )


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"], dependencies=[Depends(_bind_session)])


@cart_router.get("/{session_id}", response_model=CartSummaryResponse)
async def get_cart(session_id: str) -> CartSummaryResponse:
    return _cart_summary(LineItemStore.open(session_id))


@cart_router.get("/{session_id}/next-action", response_model=NextActionResponse)
async def get_next_action(session_id: str, excluding: str | None = None) -> NextActionResponse:
    store = LineItemStore.open(session_id)
    return _next_action_response(store.navigation.next_action(excluding=excluding))


@cart_router.post("/{session_id}/items", status_code=201, response_model=ItemAddedResponse)
async def add_cart_item(session_id: str, body: AddToCartRequest) -> ItemAddedResponse:
    command = AddToCart(
        session_id=session_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    item_id = current_domain.process(command, asynchronous=False)

    item = LineItemStore.open(session_id).cart.find_item(item_id)
    return ItemAddedResponse(item_id=item_id, message=f"{item.product.name} added to your cart.")


@cart_router.put("/{session_id}/items/{item_id}", response_model=StatusResponse)
async def update_cart_item(session_id: str, item_id: str, body: UpdateCartItemRequest) -> StatusResponse:
    command = UpdateCartItem(
        session_id=session_id,
        item_id=item_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{session_id}/items/{item_id}", response_model=StatusResponse)
async def remove_cart_item(session_id: str, item_id: str) -> StatusResponse:
    current_domain.process(RemoveFromCart(session_id=session_id, item_id=item_id), asynchronous=False)
    return StatusResponse()


@cart_router.delete("/{session_id}", response_model=StatusResponse)
async def clear_cart(session_id: str) -> StatusResponse:
    current_domain.process(ClearCart(session_id=session_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Registration forms
# ---------------------------------------------------------------------------
@cart_router.put("/{session_id}/items/{item_id}/vendor-registration", response_model=NextActionResponse)
async def record_vendor_registration(
    session_id: str, item_id: str, body: VendorRegistrationRequest
) -> NextActionResponse:
    _require_item(session_id, item_id)
    command = RecordVendorRegistration(session_id=session_id, item_id=item_id, **body.model_dump())
    next_action = current_domain.process(command, asynchronous=False)
    return _next_action_response(next_action)


@cart_router.put("/{session_id}/items/{item_id}/volunteer-registration", response_model=NextActionResponse)
async def record_volunteer_registration(
    session_id: str, item_id: str, body: VolunteerRegistrationRequest
) -> NextActionResponse:
    _require_item(session_id, item_id)
    command = RecordVolunteerRegistration(session_id=session_id, item_id=item_id, **body.model_dump())
    next_action = current_domain.process(command, asynchronous=False)
    return _next_action_response(next_action)


@cart_router.delete("/{session_id}/items/{item_id}/registration", response_model=NextActionResponse)
async def reopen_registration(session_id: str, item_id: str) -> NextActionResponse:
    _require_item(session_id, item_id)
    next_action = current_domain.process(
        ReopenRegistration(session_id=session_id, item_id=item_id),
        asynchronous=False,
    )
    return _next_action_response(next_action)


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
@cart_router.post("/{session_id}/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(session_id: str, body: CheckoutRequest | None = None) -> CheckoutResponse:
    """Submit the cart to the payment gateway and return the hosted checkout URL.

    Pending registrations answer 409 with the next registration to complete;
    gateway failures answer 502 and leave the cart intact for a retry.
    """
    command = SubmitCheckout(
        session_id=session_id,
        request_id=body.request_id if body else None,
    )
    result = current_domain.process(command, asynchronous=False)
    return CheckoutResponse(**result)
