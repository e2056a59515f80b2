"""pages/3_monthly_report.py – monthly revenue table + charts
────────────────────────────────────────────────────────────
Recomputed from the current session records on every rerun.
"""

# ── third party ─────────────────────────────────
import streamlit as st

# ── local ───────────────────────────────────────
from common import csv_download_button, get_store
from logic import (
    MONTHLY_EXPORT_FIELDS,
    MONTHLY_EXPORT_HEADERS,
    compute_monthly_stats,
    compute_seller_stats,
    format_idr,
    format_month,
    format_volume,
    monthly_stats_frame,
    seller_stats_frame,
)

try:
    st.set_page_config(page_title="Monthly Report", layout="wide")
except Exception:
    pass
st.title("📊 Monthly Report")

sellers, orders = get_store().snapshot()
monthly = compute_monthly_stats(sellers, orders)
by_seller = compute_seller_stats(sellers, orders)

if not monthly:
    st.info("No orders recorded yet.")
    st.stop()

csv_download_button(
    "⬇️ Export CSV", monthly, "monthly_report",
    MONTHLY_EXPORT_HEADERS, MONTHLY_EXPORT_FIELDS, key="export_monthly",
)

tab_table, tab_charts = st.tabs(["Table View", "Charts View"])

# ─────────────────────────────────────
# 1. Table
# ─────────────────────────────────────
with tab_table:
    table = monthly_stats_frame(monthly)
    table["month"] = table["month"].map(format_month)
    for col in ("total_order_amount", "total_volume_amount", "total_amount"):
        table[col] = table[col].map(format_idr)
    table["total_volume"] = table["total_volume"].map(format_volume)
    table.columns = MONTHLY_EXPORT_HEADERS
    st.dataframe(table, hide_index=True, use_container_width=True)

# ─────────────────────────────────────
# 2. Charts (oldest month on the left)
# ─────────────────────────────────────
with tab_charts:
    chart = monthly_stats_frame(monthly).iloc[::-1].copy()
    chart["month"] = chart["month"].map(lambda m: format_month(m, short=True))
    chart = chart.set_index("month")

    c1, c2 = st.columns(2)
    with c1:
        st.markdown("**Revenue Breakdown**")
        st.bar_chart(
            chart[["total_order_amount", "total_volume_amount"]].rename(columns={
                "total_order_amount": "Order Revenue",
                "total_volume_amount": "Volume Revenue",
            }),
            height=300,
        )
    with c2:
        st.markdown("**Order Volume Trend**")
        st.line_chart(chart[["total_orders"]].rename(columns={"total_orders": "Orders"}), height=300)

    c3, c4 = st.columns(2)
    with c3:
        st.markdown("**Total Volume (m³)**")
        st.bar_chart(chart[["total_volume"]].rename(columns={"total_volume": "Volume"}), height=300)
    with c4:
        st.markdown("**Revenue Share by Seller (%)**")
        share = seller_stats_frame(by_seller).set_index("seller_name")
        st.bar_chart(share[["percentage"]], height=300)
