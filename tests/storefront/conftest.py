import pytest
from payments.gateway import reset_gateway
from protean import current_domain
from protean.integrations.pytest import DomainFixture
from storefront.cart.cart import VendorRegistration
from storefront.catalogue import InMemoryCatalogue, Product, ProductKind, reset_catalogue, set_catalogue
from storefront.checkout import reset_submitter

TICKET = Product(id="ticket-001", name="Riverfront Festival Ticket", price=15.0, kind=ProductKind.TICKET.value)
T_SHIRT = Product(
    id="merch-001",
    name="Festival T-Shirt",
    price=20.0,
    kind=ProductKind.MERCHANDISE.value,
    image_url="https://cdn.example.test/shirt.png",
)
VENDOR_SPOT = Product(id="vendor-001", name="Market Vendor Spot", price=75.0, kind=ProductKind.VENDOR_SPOT.value)
SECOND_VENDOR_SPOT = Product(id="vendor-002", name="Food Truck Spot", price=120.0, kind=ProductKind.VENDOR_SPOT.value)
VOLUNTEER_SHIFT = Product(
    id="volunteer-001", name="Saturday Cleanup Shift", price=0.0, kind=ProductKind.VOLUNTEER_SHIFT.value
)

ALL_PRODUCTS = [TICKET, T_SHIRT, VENDOR_SPOT, SECOND_VENDOR_SPOT, VOLUNTEER_SHIFT]

# Answers to every required question on the vendor form
VENDOR_FORM = {
    "full_name": "Jordan Lee",
    "business_name": "Gulf Coast Candles",
    "business_address": "412 Magazine Street",
    "city": "New Orleans",
    "state": "LA",
    "zip_code": "70130",
    "phone_number": "(504) 555-0142",
    "email": "jordan@example.test",
    "products_description": "Hand-poured soy candles",
    "agree_to_terms": True,
}


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        # Clear all databases, brokers and the event store
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def catalogue():
    catalogue = InMemoryCatalogue(ALL_PRODUCTS)
    set_catalogue(catalogue)
    yield catalogue
    reset_catalogue()


@pytest.fixture(autouse=True)
def _reset_checkout():
    yield
    reset_gateway()
    reset_submitter()


@pytest.fixture()
def ticket():
    return TICKET


@pytest.fixture()
def t_shirt():
    return T_SHIRT


@pytest.fixture()
def vendor_spot():
    return VENDOR_SPOT


@pytest.fixture()
def second_vendor_spot():
    return SECOND_VENDOR_SPOT


@pytest.fixture()
def volunteer_shift():
    return VOLUNTEER_SHIFT


@pytest.fixture()
def vendor_form():
    return dict(VENDOR_FORM)


@pytest.fixture()
def vendor_registration(vendor_form):
    return VendorRegistration(**vendor_form)
