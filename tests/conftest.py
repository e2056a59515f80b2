import pytest

from logic import RecordStore, get_store


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def seller_a(store):
    # 10,000 per m³ / 5,000 per small order / 8,000 per large order
    return store.create_seller("Seller A", 10000, 5000, 8000, seller_id="A")


@pytest.fixture
def seller_b(store):
    return store.create_seller("Seller B", 20000, 4000, 6000, seller_id="B")


@pytest.fixture
def api_store():
    """Process-wide store used by the API, emptied around each test."""
    s = get_store()
    s.clear()
    yield s
    s.clear()
