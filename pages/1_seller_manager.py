"""pages/1_seller_manager.py – seller list / add / edit / delete
────────────────────────────────────────────────────────────
* three rates per seller: per m³, orders with ≤3 products, orders with >3 products
* deleting a seller deletes all of its orders
"""

# ── third party ─────────────────────────────────
import streamlit as st
import pandas as pd

# ── local ───────────────────────────────────────
from common import csv_download_button, get_store
from logic import (
    SELLER_EXPORT_FIELDS,
    SELLER_EXPORT_HEADERS,
    format_idr,
    seller_export_rows,
)

try:
    st.set_page_config(page_title="Seller Management", layout="wide")
except Exception:
    pass
st.title("🏷️ Seller Management")

store = get_store()
sellers = store.list_sellers()

# ─────────────────────────────────────
# 1. Seller list + export
# ─────────────────────────────────────
csv_download_button(
    "⬇️ Export CSV", seller_export_rows(sellers), "sellers",
    SELLER_EXPORT_HEADERS, SELLER_EXPORT_FIELDS, key="export_sellers",
)

if sellers:
    st.dataframe(
        pd.DataFrame({
            "Name": [s.name for s in sellers],
            "Rate per m³": [format_idr(s.rate_per_cubic_meter) for s in sellers],
            "Rate (3 or fewer)": [format_idr(s.rate_under_three) for s in sellers],
            "Rate (more than 3)": [format_idr(s.rate_over_three) for s in sellers],
        }),
        hide_index=True,
        use_container_width=True,
    )
else:
    st.info("No sellers yet. Add one below.")


def rate_inputs(prefix: str, seller=None):
    c1, c2, c3 = st.columns(3)
    per_m3 = c1.number_input(
        "Rate per Cubic Meter (Rp)", min_value=0, step=1,
        value=int(seller.rate_per_cubic_meter) if seller else 0, key=f"{prefix}_m3",
    )
    under = c2.number_input(
        "Rate for 3 or fewer products (Rp)", min_value=0, step=1,
        value=int(seller.rate_under_three) if seller else 0, key=f"{prefix}_under",
    )
    over = c3.number_input(
        "Rate for more than 3 products (Rp)", min_value=0, step=1,
        value=int(seller.rate_over_three) if seller else 0, key=f"{prefix}_over",
    )
    return per_m3, under, over


# ─────────────────────────────────────
# 2. Add seller
# ─────────────────────────────────────
st.subheader("➕ Add New Seller")
with st.form("add_seller", clear_on_submit=True):
    name = st.text_input("Name")
    per_m3, under, over = rate_inputs("add")
    if st.form_submit_button("Add Seller"):
        try:
            store.create_seller(name, per_m3, under, over)
            st.success(f"✅ '{name}' added")
            st.rerun()
        except ValueError as e:
            st.error(f"🚨 {e}")

# ─────────────────────────────────────
# 3. Edit / delete
# ─────────────────────────────────────
if sellers:
    st.subheader("✏️ Edit Seller")
    selected = st.selectbox(
        "Seller", sellers, format_func=lambda s: s.name, key="edit_seller_pick"
    )

    with st.form("edit_seller"):
        new_name = st.text_input("Name", value=selected.name)
        per_m3, under, over = rate_inputs(f"edit_{selected.id}", selected)
        if st.form_submit_button("Save Changes"):
            try:
                store.update_seller(
                    selected.id, name=new_name,
                    rate_per_cubic_meter=per_m3, rate_under_three=under, rate_over_three=over,
                )
                st.success("✅ saved")
                st.rerun()
            except ValueError as e:
                st.error(f"🚨 {e}")

    n_orders = len(store.list_orders(seller_id=selected.id))
    confirm = st.checkbox(
        f"Delete '{selected.name}' and its {n_orders} order record(s)", key=f"confirm_{selected.id}"
    )
    if st.button("🗑️ Delete Seller", disabled=not confirm):
        removed = store.delete_seller(selected.id)
        st.warning(f"'{selected.name}' deleted ({removed} orders removed)")
        st.rerun()
