import os
from pathlib import Path
from uuid import uuid4

import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the domain.toml overlay before the domain is imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    """Run each test inside the domain context and leave no data behind."""
    from storefront.revalidation import reset_page_cache

    with storefront_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_page_cache()


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------
@pytest.fixture()
def customer():
    from storefront.shared.identity import CurrentUser

    return CurrentUser(id="cust-001", email="ana@example.com", phone="+63 917 555 0101")


@pytest.fixture()
def other_customer():
    from storefront.shared.identity import CurrentUser

    return CurrentUser(id="cust-002", email="ben@example.com")


@pytest.fixture()
def admin():
    from storefront.shared.identity import CurrentUser, UserRole

    return CurrentUser(id="admin-001", email="ops@example.com", role=UserRole.ADMIN.value)


@pytest.fixture()
def page_cache():
    from storefront.revalidation import set_page_cache
    from storefront.revalidation.fake_adapter import FakePageCache

    cache = FakePageCache()
    set_page_cache(cache)
    return cache


# ---------------------------------------------------------------------------
# Catalogue builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    from storefront.catalogue.management import CreateProduct

    def _make(
        name="Linen Camp Shirt",
        brand="Tabako",
        slug=None,
        image_urls='["https://cdn.example.com/shirt.jpg"]',
        is_featured=False,
    ):
        return current_domain.process(
            CreateProduct(
                name=name,
                slug=slug or f"linen-camp-shirt-{uuid4().hex[:6]}",
                brand=brand,
                description="Relaxed short-sleeve shirt in washed linen.",
                image_urls=image_urls,
                is_featured=is_featured,
            ),
            asynchronous=False,
        )

    return _make


@pytest.fixture()
def make_variant(make_product):
    """Create a variant (and a product unless one is given) with opening stock."""
    from storefront.catalogue.management import AddVariant

    def _make(price=1000.0, inventory=10, product_id=None, name="M / Black", sku=None, compare_at_price=None):
        return current_domain.process(
            AddVariant(
                product_id=product_id or make_product(),
                name=name,
                sku=sku or f"SKU-{uuid4().hex[:8].upper()}",
                price=price,
                compare_at_price=compare_at_price,
                initial_inventory=inventory,
                added_by="admin-001",
            ),
            asynchronous=False,
        )

    return _make


# ---------------------------------------------------------------------------
# Address book and checkout input
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_address():
    """Save an address for ``user`` and return its id."""
    from storefront.actions.addresses import add_address

    def _make(user, **overrides):
        data = {
            "address_type": "BOTH",
            "first_name": "Ana",
            "last_name": "Reyes",
            "address_line1": "12 Mabini St.",
            "city": "Makati",
            "state": "Metro Manila",
            "zip_code": "1210",
            **overrides,
        }
        return add_address(user, data).value["address_id"]

    return _make


@pytest.fixture()
def checkout_for(make_address):
    """Checkout input whose addresses belong to ``user``."""

    def _for(user):
        address_id = make_address(user)
        return {
            "shipping_address_id": address_id,
            "billing_address_id": address_id,
            "shipping_method": "standard",
            "payment_method": "gcash",
        }

    return _for


@pytest.fixture()
def checkout_input(customer, checkout_for):
    return checkout_for(customer)
