"""Cart aggregate: the line items a browsing session intends to buy.

A cart belongs to a session (device), not to an account. Every line item keeps
a snapshot of the catalogue entry it was created from, so price changes in the
catalogue never reach an in-progress cart. Vendor spots and volunteer shifts
also carry the registration details their forms collected.
"""

import re
from datetime import UTC, datetime
from urllib.parse import urlparse

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from storefront.cart.events import (
    CartCleared,
    LineItemAdded,
    LineItemQuantityUpdated,
    LineItemRemoved,
    RegistrationCompleted,
    RegistrationReopened,
)
from storefront.catalogue.port import ProductKind
from storefront.domain import storefront


_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

PROMO_URL_FIELDS = ("website_url", "facebook_url", "instagram_url", "tiktok_url", "other_promo_url")


def _is_web_url(value):
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _validate_quantity(quantity):
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise ValidationError({"quantity": ["Quantity must be a positive whole number"]})


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Cart")
class ProductSnapshot:
    """Catalogue data copied into the cart when the product was added."""

    name = String(required=True, max_length=255)
    price = Float(min_value=0.0, default=0.0)
    kind = String(required=True, choices=ProductKind)
    image_url = String(max_length=1000)


@storefront.value_object(part_of="Cart")
class VendorRegistration:
    """Details a vendor supplies for a booth or market spot.

    Contact, address and product description are required, and so is
    acceptance of the vendor terms. Promotional links are optional but must
    be http(s) URLs when given.
    """

    full_name = String(required=True, max_length=255)
    business_name = String(required=True, max_length=255)
    business_address = String(required=True, max_length=255)
    business_address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, min_length=5, max_length=10)
    phone_number = String(required=True, max_length=30)
    email = String(required=True, max_length=254)
    has_provided_promo_info = Boolean(default=False)
    website_url = String(max_length=500)
    facebook_url = String(max_length=500)
    instagram_url = String(max_length=500)
    tiktok_url = String(max_length=500)
    other_promo_url = String(max_length=500)
    products_description = Text(required=True)
    preferred_location = String(max_length=255)
    agree_to_terms = Boolean(default=False)

    @invariant.post
    def contact_details_are_reachable(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": ["Must be a valid email"]})
        if self.phone_number and len(re.sub(r"\D", "", self.phone_number)) < 10:
            raise ValidationError({"phone_number": ["Phone number must be at least 10 digits"]})

    @invariant.post
    def promo_links_are_urls(self):
        for field_name in PROMO_URL_FIELDS:
            url = getattr(self, field_name)
            if url and not _is_web_url(url):
                raise ValidationError({field_name: ["Must be a valid URL"]})

    @invariant.post
    def terms_are_accepted(self):
        if not self.agree_to_terms:
            raise ValidationError({"agree_to_terms": ["You must agree to the terms and conditions"]})


@storefront.value_object(part_of="Cart")
class VolunteerRegistration:
    """Details a volunteer supplies for a shift."""

    skills = Text()
    experience = Text()
    availability_notes = Text(required=True)


# Registration payload accepted by each registrable kind
REGISTRATION_TYPES = {
    ProductKind.VENDOR_SPOT.value: VendorRegistration,
    ProductKind.VOLUNTEER_SHIFT.value: VolunteerRegistration,
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Cart")
class LineItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    sequence = Integer(required=True)
    product = ValueObject(ProductSnapshot, required=True)
    vendor_registration = ValueObject(VendorRegistration)
    volunteer_registration = ValueObject(VolunteerRegistration)
    added_at = DateTime()

    @property
    def kind(self):
        return self.product.kind

    @property
    def is_registrable(self):
        return self.product.kind in REGISTRATION_TYPES

    @property
    def registration_data(self):
        """The registration payload matching this item's kind, or None."""
        if self.product.kind == ProductKind.VENDOR_SPOT.value:
            return self.vendor_registration
        if self.product.kind == ProductKind.VOLUNTEER_SHIFT.value:
            return self.volunteer_registration
        return None

    @property
    def line_total(self):
        return self.quantity * self.product.price


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Cart:
    session_id = String(required=True, max_length=255)
    items = HasMany(LineItem)
    last_sequence = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_item_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, session_id):
        now = datetime.now(UTC)
        return cls(
            session_id=session_id,
            last_sequence=0,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Derived state
    # -------------------------------------------------------------------
    @property
    def ordered_items(self):
        """Line items in the order they were first added."""
        return sorted(self.items, key=lambda item: item.sequence)

    @property
    def item_count(self):
        return sum(item.quantity for item in self.items)

    @property
    def total(self):
        return sum(item.line_total for item in self.items)

    def find_item(self, item_id):
        return next((i for i in self.items if str(i.id) == str(item_id)), None)

    def find_item_for_product(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, quantity=1):
        """Add a catalogue product, or top up the quantity if it is already in the cart.

        Returns the affected line item.
        """
        _validate_quantity(quantity)

        now = datetime.now(UTC)
        existing = self.find_item_for_product(product.id)

        if existing:
            existing.quantity += quantity
            item = existing
        else:
            snapshot = ProductSnapshot(
                name=product.name,
                price=product.price,
                kind=product.kind,
                image_url=product.image_url,
            )
            self.last_sequence = (self.last_sequence or 0) + 1
            item = LineItem(
                product_id=str(product.id),
                quantity=quantity,
                sequence=self.last_sequence,
                product=snapshot,
                added_at=now,
            )
            self.add_items(item)

        self.updated_at = now

        self.raise_(
            LineItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                product_name=item.product.name,
                quantity=quantity,
            )
        )
        return item

    def update_item(self, item_id, quantity):
        """Replace the quantity of a line item. Unknown ids are ignored."""
        _validate_quantity(quantity)

        item = self.find_item(item_id)
        if item is None:
            return

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            LineItemQuantityUpdated(
                cart_id=str(self.id),
                item_id=str(item_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, item_id):
        """Remove a line item. Unknown ids are ignored."""
        item = self.find_item(item_id)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            LineItemRemoved(
                cart_id=str(self.id),
                item_id=str(item_id),
            )
        )

    def clear(self):
        """Drop every line item at once."""
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                items_removed_count=len(removed),
            )
        )

    # -------------------------------------------------------------------
    # Registration details
    # -------------------------------------------------------------------
    def set_registration_data(self, item_id, data):
        """Attach registration details to a vendor spot or volunteer shift.

        Passing ``None`` withdraws the details and puts the item back to
        pending. Unknown ids are ignored.
        """
        item = self.find_item(item_id)
        if item is None:
            return

        if data is None:
            if item.registration_data is None:
                return
            item.vendor_registration = None
            item.volunteer_registration = None
            self.updated_at = datetime.now(UTC)
            self.raise_(
                RegistrationReopened(
                    cart_id=str(self.id),
                    item_id=str(item.id),
                    kind=item.kind,
                )
            )
            return

        expected = REGISTRATION_TYPES.get(item.kind)
        if expected is None:
            raise ValidationError({"registration": [f"{item.product.name} does not take registration details"]})
        if not isinstance(data, expected):
            raise ValidationError(
                {"registration": [f"{item.product.name} needs {expected.__name__} details, got {type(data).__name__}"]}
            )

        if item.kind == ProductKind.VENDOR_SPOT.value:
            item.vendor_registration = data
        else:
            item.volunteer_registration = data
        self.updated_at = datetime.now(UTC)

        self.raise_(
            RegistrationCompleted(
                cart_id=str(self.id),
                item_id=str(item.id),
                kind=item.kind,
            )
        )
