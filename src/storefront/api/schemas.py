"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "vendor-spot-12",
                    "quantity": 1,
                }
            ]
        }
    }


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(ge=1)


class VendorRegistrationRequest(BaseModel):
    """Vendor form answers. Format checks live in the VendorRegistration value object."""

    full_name: str = Field(min_length=1)
    business_name: str = Field(min_length=1)
    business_address: str = Field(min_length=1)
    business_address_line2: str | None = None
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    zip_code: str
    phone_number: str
    email: str
    has_provided_promo_info: bool = False
    website_url: str | None = None
    facebook_url: str | None = None
    instagram_url: str | None = None
    tiktok_url: str | None = None
    other_promo_url: str | None = None
    products_description: str = Field(min_length=1)
    preferred_location: str | None = None
    agree_to_terms: bool = False


class VolunteerRegistrationRequest(BaseModel):
    availability_notes: str
    skills: str | None = None
    experience: str | None = None


class CheckoutRequest(BaseModel):
    request_id: str | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class NextActionResponse(BaseModel):
    action: str
    item_id: str | None = None
    kind: str | None = None
    path: str
    message: str


class LineItemResponse(BaseModel):
    item_id: str
    product_id: str
    name: str
    kind: str
    price: float
    image_url: str | None = None
    quantity: int
    line_total: float
    registration_status: str


class CartSummaryResponse(BaseModel):
    session_id: str
    items: list[LineItemResponse]
    item_count: int
    total: float
    next_action: NextActionResponse


class ItemAddedResponse(BaseModel):
    item_id: str
    message: str


class CheckoutResponse(BaseModel):
    checkout_url: str
    request_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
