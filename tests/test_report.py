import pytest

from logic import (
    Order,
    Seller,
    compute_monthly_stats,
    compute_seller_stats,
    monthly_stats_frame,
    order_charges,
    seller_stats_frame,
)


def _order(oid, seller_id, month, under=0, over=0, volume=0.0):
    return Order(
        id=oid, seller_id=seller_id, month=month,
        quantity_under_three=under, quantity_over_three=over, volume=volume,
    )


SELLERS = [
    Seller("A", "Seller A", 10000, 5000, 8000),
    Seller("B", "Seller B", 20000, 4000, 6000),
    Seller("C", "Seller C", 0, 1000, 1000),
]
ORDERS = [
    _order("1", "A", "2024-01", 2, 1, 1.5),
    _order("2", "B", "2024-01", 0, 3, 0.25),
    _order("3", "A", "2024-02", 5, 0, 0.123456),
    _order("4", "C", "2024-03", 1, 1, 2.0),
    _order("5", "gone", "2024-02", 4, 4, 3.0),
    _order("6", "A", "2024-01", 1, 0, 0.5),
]


# ─────────────────────────────────────
# charge formula
# ─────────────────────────────────────
def test_order_charges():
    volume_charge, order_charge = order_charges(ORDERS[0], SELLERS[0])
    assert volume_charge == pytest.approx(15000)
    assert order_charge == 18000


# ─────────────────────────────────────
# monthly
# ─────────────────────────────────────
def test_single_order_scenario():
    stats = compute_monthly_stats([SELLERS[0]], [ORDERS[0]])
    assert len(stats) == 1
    s = stats[0]
    assert s.month == "2024-01"
    assert s.total_order_amount == 18000
    assert s.total_volume_amount == pytest.approx(15000)
    assert s.total_amount == pytest.approx(33000)
    assert s.total_orders == 3
    assert s.total_volume == pytest.approx(1.5)
    assert s.total_sellers == 1


def test_no_orders_gives_empty_reports():
    assert compute_monthly_stats(SELLERS, []) == []
    assert compute_seller_stats(SELLERS, []) == []
    assert compute_monthly_stats([], []) == []


def test_months_sorted_newest_first():
    months = [s.month for s in compute_monthly_stats(SELLERS, ORDERS)]
    assert months == ["2024-03", "2024-02", "2024-01"]


def test_months_sort_across_years():
    orders = [_order("1", "A", "2024-12", 1), _order("2", "A", "2025-01", 1), _order("3", "A", "2023-06", 1)]
    months = [s.month for s in compute_monthly_stats(SELLERS, orders)]
    assert months == ["2025-01", "2024-12", "2023-06"]


def test_distinct_sellers_per_month():
    by_month = {s.month: s for s in compute_monthly_stats(SELLERS, ORDERS)}
    # A twice + B once in January
    assert by_month["2024-01"].total_sellers == 2
    # A + orphan in February
    assert by_month["2024-02"].total_sellers == 1
    assert by_month["2024-03"].total_sellers == 1


def test_same_seller_twice_counts_once():
    orders = [_order("1", "A", "2024-05", 1), _order("2", "A", "2024-05", 0, 2)]
    assert compute_monthly_stats(SELLERS, orders)[0].total_sellers == 1


def test_orphan_counts_volume_not_revenue():
    orphan = _order("x", "nobody", "2024-04", 3, 2, 1.25)
    stats = compute_monthly_stats(SELLERS, [orphan])
    assert len(stats) == 1
    s = stats[0]
    assert s.total_orders == 5
    assert s.total_volume == pytest.approx(1.25)
    assert s.total_sellers == 0
    assert s.total_amount == 0
    assert s.total_order_amount == 0
    assert s.total_volume_amount == 0
    assert compute_seller_stats(SELLERS, [orphan]) == []


def test_orphan_does_not_change_amounts():
    with_orphan = {s.month: s for s in compute_monthly_stats(SELLERS, ORDERS)}
    without = {s.month: s for s in compute_monthly_stats(SELLERS, [o for o in ORDERS if o.seller_id != "gone"])}
    assert with_orphan["2024-02"].total_amount == pytest.approx(without["2024-02"].total_amount)
    assert with_orphan["2024-02"].total_orders == without["2024-02"].total_orders + 8


def test_totals_preserved_across_months():
    stats = compute_monthly_stats(SELLERS, ORDERS)
    assert sum(s.total_orders for s in stats) == sum(o.total_quantity for o in ORDERS)
    assert sum(s.total_volume for s in stats) == pytest.approx(sum(o.volume for o in ORDERS))


def test_amount_is_order_plus_volume():
    for s in compute_monthly_stats(SELLERS, ORDERS):
        assert s.total_amount == pytest.approx(s.total_order_amount + s.total_volume_amount)


def test_monthly_is_recomputed_each_call():
    orders = list(ORDERS)
    first = compute_monthly_stats(SELLERS, orders)
    orders.append(_order("7", "B", "2024-03", 1, 0, 0.0))
    second = compute_monthly_stats(SELLERS, orders)
    assert first[0].total_orders + 1 == second[0].total_orders


# ─────────────────────────────────────
# per seller
# ─────────────────────────────────────
def test_seller_totals_and_sorting():
    stats = compute_seller_stats(SELLERS, ORDERS)
    assert [s.seller_id for s in stats] == ["A", "B", "C"]
    amounts = [s.total_amount for s in stats]
    assert amounts == sorted(amounts, reverse=True)

    a = stats[0]
    # 33000 + (25000 + 1234.56) + (5000 + 5000)
    assert a.total_amount == pytest.approx(33000 + 26234.56 + 10000)
    assert a.seller_name == "Seller A"


def test_percentages_sum_to_100():
    stats = compute_seller_stats(SELLERS, ORDERS)
    assert sum(s.percentage for s in stats) == pytest.approx(100.0)


def test_seller_without_orders_is_omitted():
    stats = compute_seller_stats(SELLERS, [ORDERS[0]])
    assert [s.seller_id for s in stats] == ["A"]
    assert stats[0].percentage == pytest.approx(100.0)


def test_zero_revenue_percentage_is_zero():
    free = Seller("F", "Free", 0, 0, 0)
    stats = compute_seller_stats([free], [_order("1", "F", "2024-01", 3, 0, 1.0)])
    assert len(stats) == 1
    assert stats[0].total_amount == 0
    assert stats[0].percentage == 0.0


# ─────────────────────────────────────
# frames
# ─────────────────────────────────────
def test_frames_keep_columns_when_empty():
    assert list(monthly_stats_frame([]).columns) == [
        "month", "total_orders", "total_sellers",
        "total_order_amount", "total_volume_amount", "total_amount", "total_volume",
    ]
    assert list(seller_stats_frame([]).columns) == ["seller_id", "seller_name", "total_amount", "percentage"]


def test_monthly_frame_rows():
    df = monthly_stats_frame(compute_monthly_stats(SELLERS, ORDERS))
    assert df["month"].tolist() == ["2024-03", "2024-02", "2024-01"]
    assert int(df["total_orders"].sum()) == sum(o.total_quantity for o in ORDERS)
