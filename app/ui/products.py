# app/ui/products.py

import streamlit as st
from services.api import fetch_products, add_product, update_product, delete_product


COLUMNS = [6, 3, 4, 8, 1.2, 1.2]
HEADERS = ["Name 🛍️", "Price 💰", "Category 🏷️", "Description 📝"]


def refresh_products():
    """
    Replaces the local product snapshot with the server's full list.
    """
    result = fetch_products(st.session_state.get("token"))
    if isinstance(result, dict) and result.get("error"):
        st.error(result["error"])
        return
    st.session_state["products"] = result


def product_form(key, product=None):
    """
    Renders a product form and returns the submitted body, or None.
    """
    product = product or {}
    with st.form(key):
        name = st.text_input("Name", value=product.get("productName", ""))
        price = st.number_input("Price", min_value=0, step=1, value=int(product.get("productPrice") or 0))
        category = st.text_input("Category", value=product.get("productCategory", ""))
        description = st.text_area("Description", value=product.get("productDescription", ""), max_chars=255)
        submitted = st.form_submit_button("Save")

    if not submitted:
        return None
    return {
        "productName": name,
        "productPrice": int(price),
        "productCategory": category,
        "productDescription": description,
    }


def run_mutation(result, success):
    if isinstance(result, dict) and result.get("error"):
        st.error(f"❌ {result['error']}")
        return
    st.success(f"✅ {success}")
    refresh_products()
    st.rerun()


def products_page():
    st.title("🛒 Products")
    token = st.session_state.get("token")

    if st.button("➕ Add product"):
        st.session_state["show_add_product"] = not st.session_state.get("show_add_product", False)

    if st.session_state.get("show_add_product"):
        body = product_form("add_product_form")
        if body is not None:
            st.session_state["show_add_product"] = False
            run_mutation(add_product(token, body), "Product added")

    products = st.session_state.get("products", [])
    if not products:
        st.info("No products yet.")
        return

    header = st.columns(COLUMNS)
    for col, title in zip(header, HEADERS):
        col.markdown(f"**{title}**")

    for product in products:
        pid = product["id"]
        col1, col2, col3, col4, col5, col6 = st.columns(COLUMNS)
        col1.write(product["productName"])
        col2.write(product["productPrice"])
        col3.write(product["productCategory"])
        col4.write(product["productDescription"])
        if col5.button("✏️", key=f"edit-{pid}"):
            st.session_state["editing"] = pid
        if col6.button("🗑️", key=f"delete-{pid}"):
            run_mutation(delete_product(token, pid), f"{product['productName']} deleted")

        if st.session_state.get("editing") == pid:
            body = product_form(f"edit_form_{pid}", product)
            if body is not None:
                st.session_state.pop("editing", None)
                run_mutation(update_product(token, pid, body), "Product updated")
