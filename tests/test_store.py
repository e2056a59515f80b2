import logging

import pytest

from logic import RecordNotFoundError, compute_monthly_stats, compute_seller_stats


# ─────────────────────────────────────
# sellers
# ─────────────────────────────────────
def test_create_seller_generates_unique_ids(store):
    s1 = store.create_seller("One", 1, 2, 3)
    s2 = store.create_seller("Two", 1, 2, 3)
    assert s1.id != s2.id
    assert [s.name for s in store.list_sellers()] == ["One", "Two"]


def test_create_seller_rejects_bad_input(store, seller_a):
    with pytest.raises(ValueError):
        store.create_seller("  ", 1, 1, 1)
    with pytest.raises(ValueError):
        store.create_seller("Neg", -1, 1, 1)
    with pytest.raises(ValueError):
        store.create_seller("Dup", 1, 1, 1, seller_id="A")


@pytest.mark.parametrize("rate", [float("inf"), float("-inf"), float("nan")])
def test_create_seller_rejects_non_finite_rate(store, rate):
    with pytest.raises(ValueError, match="finite"):
        store.create_seller("X", rate, 1, 1)
    with pytest.raises(ValueError, match="finite"):
        store.create_seller("X", 1, 1, rate)
    assert store.list_sellers() == []


def test_update_seller_rejects_non_finite_rate(store, seller_a):
    with pytest.raises(ValueError):
        store.update_seller("A", rate_per_cubic_meter=float("inf"))
    assert store.get_seller("A").rate_per_cubic_meter == 10000


def test_update_seller_keeps_id(store, seller_a):
    updated = store.update_seller("A", name="Seller A2", rate_over_three=9000)
    assert updated.id == "A"
    assert updated.name == "Seller A2"
    assert updated.rate_over_three == 9000
    assert updated.rate_under_three == 5000
    assert store.get_seller("A") == updated


def test_update_seller_cannot_change_id(store, seller_a):
    with pytest.raises(ValueError):
        store.update_seller("A", id="Z")


def test_unknown_ids_raise_not_found(store):
    with pytest.raises(RecordNotFoundError):
        store.get_seller("missing")
    with pytest.raises(KeyError):
        store.update_seller("missing", name="x")
    with pytest.raises(RecordNotFoundError):
        store.delete_order("missing")


def test_delete_seller_cascades_to_orders(store, seller_a, seller_b):
    store.create_order("A", "2024-01", 2, 1, 1.5)
    store.create_order("A", "2024-02", 1, 0, 0.5)
    kept = store.create_order("B", "2024-01", 0, 1, 0.1)

    assert store.delete_seller("A") == 2
    assert store.list_orders() == [kept]
    assert not store.has_seller("A")

    sellers, orders = store.snapshot()
    monthly = compute_monthly_stats(sellers, orders)
    assert [m.month for m in monthly] == ["2024-01"]
    assert monthly[0].total_orders == 1
    assert [s.seller_id for s in compute_seller_stats(sellers, orders)] == ["B"]


# ─────────────────────────────────────
# orders
# ─────────────────────────────────────
def test_create_order_requires_a_quantity(store, seller_a):
    with pytest.raises(ValueError):
        store.create_order("A", "2024-01", 0, 0, 1.0)


@pytest.mark.parametrize("volume", [float("inf"), float("nan")])
def test_create_order_rejects_non_finite_volume(store, seller_a, volume):
    with pytest.raises(ValueError, match="finite"):
        store.create_order("A", "2024-01", 1, 0, volume)
    assert store.list_orders() == []


@pytest.mark.parametrize("month", ["2024-13", "2024-1", "January", ""])
def test_create_order_rejects_bad_month(store, seller_a, month):
    with pytest.raises(ValueError):
        store.create_order("A", month, 1, 0, 1.0)


def test_orphan_order_is_accepted_with_warning(store, caplog):
    with caplog.at_level(logging.WARNING, logger="logic.store"):
        order = store.create_order("ghost", "2024-01", 1, 0, 0.2)
    assert store.get_order(order.id) == order
    assert "unknown seller" in caplog.text


def test_update_order_changes_fields(store, seller_a, seller_b):
    order = store.create_order("A", "2024-01", 2, 1, 1.5)
    updated = store.update_order(order.id, seller_id="B", month="2024-03", volume=0.75)
    assert updated.id == order.id
    assert updated.created_at == order.created_at
    assert (updated.seller_id, updated.month, updated.volume) == ("B", "2024-03", 0.75)
    assert updated.quantity_under_three == 2


def test_update_order_validates(store, seller_a):
    order = store.create_order("A", "2024-01", 2, 0, 1.5)
    with pytest.raises(ValueError):
        store.update_order(order.id, quantity_under_three=0)
    with pytest.raises(ValueError):
        store.update_order(order.id, created_at=None, id="x")
    with pytest.raises(ValueError):
        store.update_order(order.id, volume=float("inf"))
    assert store.get_order(order.id).quantity_under_three == 2


def test_list_orders_filters(store, seller_a, seller_b):
    store.create_order("A", "2024-01", 1)
    store.create_order("A", "2024-02", 1)
    store.create_order("B", "2024-01", 1)
    assert len(store.list_orders(seller_id="A")) == 2
    assert len(store.list_orders(month="2024-01")) == 2
    assert len(store.list_orders(seller_id="B", month="2024-02")) == 0


def test_snapshot_is_a_copy(store, seller_a):
    sellers, orders = store.snapshot()
    store.create_order("A", "2024-01", 1)
    assert orders == []
    assert len(store.list_orders()) == 1
    sellers.clear()
    assert store.has_seller("A")


def test_clear(store, seller_a):
    store.create_order("A", "2024-01", 1)
    store.clear()
    assert store.snapshot() == ([], [])
