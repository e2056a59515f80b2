"""pages/2_order_manager.py – record / edit / delete monthly orders
────────────────────────────────────────────────────────────
* one record = one seller × one month (≤3 / >3 product order counts + volume)
* at least one of the two counts must be > 0
"""

# ── third party ─────────────────────────────────
import streamlit as st
import pandas as pd

# ── local ───────────────────────────────────────
from common import csv_download_button, get_store
from logic import (
    MONTH_OPTIONS,
    ORDER_EXPORT_FIELDS,
    ORDER_EXPORT_HEADERS,
    UNKNOWN_SELLER,
    format_month,
    format_volume,
    order_export_rows,
    seller_choices,
    volume_from_dimensions,
)

try:
    st.set_page_config(page_title="Orders", layout="wide")
except Exception:
    pass
st.title("🧾 Orders")

store = get_store()
sellers = store.list_sellers()
MONTH_VALUES = [v for v, _ in MONTH_OPTIONS]
MONTH_LABELS = dict(MONTH_OPTIONS)

if not sellers:
    st.info("Add a seller first on the Seller Management page.")

# ─────────────────────────────────────
# 1. Dimension calculator
# ─────────────────────────────────────
with st.expander("📐 Product Dimension Calculator"):
    c1, c2, c3 = st.columns(3)
    length = c1.number_input("Length (cm)", min_value=0.0, step=0.1, key="dim_l")
    width = c2.number_input("Width (cm)", min_value=0.0, step=0.1, key="dim_w")
    height = c3.number_input("Height (cm)", min_value=0.0, step=0.1, key="dim_h")
    if st.button("Calculate"):
        st.session_state["calc_volume"] = volume_from_dimensions(length, width, height)
    if "calc_volume" in st.session_state:
        st.write(f"Volume: **{format_volume(st.session_state['calc_volume'])}**")


def order_inputs(prefix: str, order=None):
    seller_ids, seller_idx = seller_choices(sellers, order.seller_id if order else None)
    names = {s.id: s.name for s in sellers}
    if order and order.seller_id not in names:
        st.warning("⚠️ the seller of this order was deleted; pick a seller or it stays Unknown")
    seller_id = st.selectbox(
        "Seller", seller_ids, index=seller_idx,
        format_func=lambda sid: names.get(sid, f"{UNKNOWN_SELLER} ({sid})"), key=f"{prefix}_seller",
    )
    month_idx = MONTH_VALUES.index(order.month) if order and order.month in MONTH_VALUES else 0
    month = st.selectbox(
        "Month", MONTH_VALUES, index=month_idx,
        format_func=lambda m: MONTH_LABELS[m], key=f"{prefix}_month",
    )
    c1, c2 = st.columns(2)
    under = c1.number_input(
        "Orders with 3 or fewer products", min_value=0, step=1,
        value=order.quantity_under_three if order else 0, key=f"{prefix}_under",
    )
    over = c2.number_input(
        "Orders with more than 3 products", min_value=0, step=1,
        value=order.quantity_over_three if order else 0, key=f"{prefix}_over",
    )
    default_volume = order.volume if order else st.session_state.get("calc_volume", 0.0)
    volume = st.number_input(
        "Volume (m³)", min_value=0.0, step=0.000001, format="%.6f",
        value=float(default_volume), key=f"{prefix}_volume",
    )
    return seller_id, month, int(under), int(over), float(volume)


# ─────────────────────────────────────
# 2. Record order
# ─────────────────────────────────────
if sellers:
    st.subheader("➕ Record Order")
    with st.form("add_order", clear_on_submit=True):
        seller_id, month, under, over, volume = order_inputs("add")
        if st.form_submit_button("Record Order"):
            try:
                store.create_order(seller_id, month, under, over, volume)
                st.success("✅ order recorded")
                st.rerun()
            except ValueError as e:
                st.error(f"🚨 {e}")

# ─────────────────────────────────────
# 3. Order history + export
# ─────────────────────────────────────
st.subheader("📜 Order History")
orders = store.list_orders()
csv_download_button(
    "⬇️ Export CSV", order_export_rows(sellers, orders), "orders",
    ORDER_EXPORT_HEADERS, ORDER_EXPORT_FIELDS, key="export_orders",
)

if not orders:
    st.info("No orders recorded yet.")
    st.stop()

names = {s.id: s.name for s in sellers}
st.dataframe(
    pd.DataFrame({
        "Date": [o.created_at.date().isoformat() for o in orders],
        "Seller": [names.get(o.seller_id, UNKNOWN_SELLER) for o in orders],
        "Month": [format_month(o.month) for o in orders],
        "≤3 Products": [o.quantity_under_three for o in orders],
        ">3 Products": [o.quantity_over_three for o in orders],
        "Volume": [format_volume(o.volume) for o in orders],
    }),
    hide_index=True,
    use_container_width=True,
)

# ─────────────────────────────────────
# 4. Edit / delete
# ─────────────────────────────────────
st.subheader("✏️ Edit Order")
selected = st.selectbox(
    "Order", orders,
    format_func=lambda o: f"{names.get(o.seller_id, UNKNOWN_SELLER)} · {format_month(o.month)} · {o.id[:8]}",
    key="edit_order_pick",
)

with st.form("edit_order"):
    seller_id, month, under, over, volume = order_inputs(f"edit_{selected.id}", selected)
    if st.form_submit_button("Save Changes"):
        try:
            store.update_order(
                selected.id, seller_id=seller_id, month=month,
                quantity_under_three=under, quantity_over_three=over, volume=volume,
            )
            st.success("✅ saved")
            st.rerun()
        except ValueError as e:
            st.error(f"🚨 {e}")

confirm = st.checkbox("Delete this order", key=f"confirm_order_{selected.id}")
if st.button("🗑️ Delete Order", disabled=not confirm):
    store.delete_order(selected.id)
    st.warning("order deleted")
    st.rerun()
