"""
common.py – shared Streamlit helpers
───────────────────────────────────────────────
* one RecordStore per browser session (st.session_state)
* CSV download button shared by the pages
"""
from __future__ import annotations

from typing import Any, Sequence

import streamlit as st

from logic import RecordStore, export_filename, to_csv

STORE_KEY = "record_store"
EXPORT_ENCODING = "utf-8-sig"


# ─────────────────────────────────────
# 1. Session store
# ─────────────────────────────────────
def get_store() -> RecordStore:
    """
    Records live only as long as the browser session;
    a page reload starts from an empty store.
    """
    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = RecordStore()
    return st.session_state[STORE_KEY]


# ─────────────────────────────────────
# 2. CSV export button
# ─────────────────────────────────────
def csv_download_button(
    label: str,
    records: Sequence[Any],
    filename: str,
    headers: list[str],
    fields: list[str],
    key: str | None = None,
) -> None:
    st.download_button(
        label,
        data=to_csv(records, headers, fields).encode(EXPORT_ENCODING),
        file_name=export_filename(filename),
        mime="text/csv",
        key=key,
        disabled=not records,
    )
