"""Registration form submissions: commands and handler.

The vendor and volunteer forms call back here once they have been filled in.
Each handler answers with the next navigation step, computed without the item
that was just handled, so the form can move straight on to the next
registration or to checkout.
"""

from protean import handle
from protean.fields import Boolean, Identifier, String, Text

from storefront.cart.cart import Cart, VendorRegistration, VolunteerRegistration
from storefront.cart.store import LineItemStore
from storefront.domain import storefront

# Vendor form answers copied verbatim from the command into VendorRegistration
VENDOR_FORM_FIELDS = (
    "full_name",
    "business_name",
    "business_address",
    "business_address_line2",
    "city",
    "state",
    "zip_code",
    "phone_number",
    "email",
    "has_provided_promo_info",
    "website_url",
    "facebook_url",
    "instagram_url",
    "tiktok_url",
    "other_promo_url",
    "products_description",
    "preferred_location",
    "agree_to_terms",
)


@storefront.command(part_of="Cart")
class RecordVendorRegistration:
    session_id = Identifier(required=True)
    item_id = Identifier(required=True)
    full_name = String(required=True, max_length=255)
    business_name = String(required=True, max_length=255)
    business_address = String(required=True, max_length=255)
    business_address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=10)
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


@storefront.command(part_of="Cart")
class RecordVolunteerRegistration:
    session_id = Identifier(required=True)
    item_id = Identifier(required=True)
    skills = Text()
    experience = Text()
    availability_notes = Text(required=True)


@storefront.command(part_of="Cart")
class ReopenRegistration:
    """Withdraw the registration details of an item so they can be edited."""

    session_id = Identifier(required=True)
    item_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class RegistrationFormsHandler:
    @handle(RecordVendorRegistration)
    def record_vendor_registration(self, command):
        registration = VendorRegistration(**{name: getattr(command, name) for name in VENDOR_FORM_FIELDS})
        return self._record(command, registration)

    @handle(RecordVolunteerRegistration)
    def record_volunteer_registration(self, command):
        registration = VolunteerRegistration(
            skills=command.skills,
            experience=command.experience,
            availability_notes=command.availability_notes,
        )
        return self._record(command, registration)

    @handle(ReopenRegistration)
    def reopen_registration(self, command):
        store = LineItemStore.open(str(command.session_id))
        store.set_registration_data(command.item_id, None)
        return store.navigation.next_action()

    def _record(self, command, registration):
        store = LineItemStore.open(str(command.session_id))
        store.set_registration_data(command.item_id, registration)
        return store.navigation.next_action(excluding=command.item_id)
