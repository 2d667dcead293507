from decimal import Decimal

import pytest

from storefront.db.session import get_engine, init_db, make_session_factory
from storefront.models.product import Product
from storefront.services.logging import set_log_level


@pytest.fixture(autouse=True)
def _reset_process_state():
    yield
    set_log_level("INFO")
    get_engine.cache_clear()


@pytest.fixture
def db_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'storefront.db'}"
    init_db(url)
    yield url
    get_engine(url).dispose()


@pytest.fixture
def session_factory(db_url):
    return make_session_factory(db_url)


@pytest.fixture
def seeded_products(session_factory):
    rows = [
        Product(id=10, name="Trail Boot", description="Waterproof boot", image_url="images/boot.jpg",
                price=Decimal("120.00"), category="Footwear"),
        Product(id=11, name="Chalk Bag", description="Climbing chalk bag", image_url="images/chalk.jpg",
                price=Decimal("15.50"), category="Equipment"),
        Product(id=12, name="Rain Jacket", description="Lightweight shell", image_url="images/jacket.jpg",
                price=Decimal("89.99"), category="clothing"),
        Product(id=13, name="Fleece", description="Midlayer", image_url="images/fleece.jpg",
                price=Decimal("49.00"), category="Clothing"),
    ]
    with session_factory() as session:
        session.add_all(rows)
    return rows
