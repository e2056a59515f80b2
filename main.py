# 📦 Indowarehub Sales home (entry point)
import streamlit as st

from common import get_store
from logic import compute_monthly_stats, format_idr

st.set_page_config(page_title="Indowarehub Sales", page_icon="📦", layout="wide")
st.title("📦 Indowarehub Sales")

st.write(
    """
    Pick a page from the sidebar.

    > Sellers → Orders → Monthly Report

    Records are kept for this browser session only and are lost on reload.
    """
)

# ── sidebar ──────────────────────────────────────
with st.sidebar:
    st.header("🔗 Menu")
    st.page_link("pages/1_seller_manager.py", label="🏷️ Seller Management")
    st.page_link("pages/2_order_manager.py", label="🧾 Orders")
    st.page_link("pages/3_monthly_report.py", label="📊 Monthly Report")

# ── quick metrics ────────────────────────────────
sellers, orders = get_store().snapshot()
monthly = compute_monthly_stats(sellers, orders)

c1, c2, c3 = st.columns(3)
c1.metric("Sellers", len(sellers))
c2.metric("Order records", len(orders))
c3.metric("Latest month revenue", format_idr(monthly[0].total_amount) if monthly else "—")
