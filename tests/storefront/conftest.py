import pytest
from protean.integrations.pytest import DomainFixture


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

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def mailer():
    """Fresh fake mailer for every test."""
    from storefront.notification.mailer import get_mailer, reset_mailer

    reset_mailer()
    adapter = get_mailer()
    yield adapter
    reset_mailer()


@pytest.fixture()
def make_product():
    """Add a product through the catalogue command and return the stored aggregate."""
    import json

    from protean.utils.globals import current_domain

    from storefront.product.management import AddProduct
    from storefront.product.product import Product

    def _make(**overrides):
        tiers = overrides.pop("pricing_tiers", [])
        fields = {
            "name": "Fresh Irish Potatoes",
            "description": "Freshly harvested from the Jos Plateau",
            "price": 1000.0,
            "category": "fresh",
            "weight": "50kg",
            "stock": 20,
        }
        fields.update(overrides)
        product_id = current_domain.process(
            AddProduct(pricing_tiers=json.dumps(tiers), **fields),
            asynchronous=False,
        )
        return current_domain.repository_for(Product).get(product_id)

    return _make
