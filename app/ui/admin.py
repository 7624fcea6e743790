# app/ui/admin.py

import streamlit as st
from services.api import delete_product
from ui.products import COLUMNS, HEADERS, run_mutation


def admin_products_page():
    st.title("🛠️ Admin Products")
    token = st.session_state.get("token")

    products = st.session_state.get("products", [])
    if not products:
        st.info("No products yet.")
        return

    header = st.columns(COLUMNS[:4] + [1.2])
    for col, title in zip(header, HEADERS):
        col.markdown(f"**{title}**")

    for product in products:
        pid = product["id"]
        col1, col2, col3, col4, col5 = st.columns(COLUMNS[:4] + [1.2])
        col1.write(product["productName"])
        col2.write(product["productPrice"])
        col3.write(product["productCategory"])
        col4.write(product["productDescription"])
        if col5.button("🗑️", key=f"admin-delete-{pid}"):
            run_mutation(delete_product(token, pid), f"{product['productName']} deleted")
