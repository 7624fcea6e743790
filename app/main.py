# app/main.py

import streamlit as st
from dotenv import load_dotenv
from ui.login import restore_session, login_page, signup_page, logout
from ui.products import products_page
from ui.admin import admin_products_page


load_dotenv()


st.set_page_config(page_title="Product Catalog", layout="wide")


def navigation():
    st.sidebar.markdown("## 📋 Menu")
    logged_in = "token" in st.session_state

    if st.sidebar.button("🏠 Home"):
        st.session_state["page"] = "home"
    if logged_in:
        if st.sidebar.button("🛒 Products"):
            st.session_state["page"] = "products"
        if st.session_state.get("is_admin") and st.sidebar.button("🛠️ Admin Products"):
            st.session_state["page"] = "admin"
    else:
        if st.sidebar.button("🔐 Login"):
            st.session_state["page"] = "login"
        if st.sidebar.button("📝 Signup"):
            st.session_state["page"] = "signup"


def home_page():
    st.title("Home")
    if "token" in st.session_state:
        st.write(f"Welcome, {st.session_state.get('email') or 'user'}!")
        if st.button("🔓 Logout"):
            logout()
            st.rerun()
    else:
        st.write("Please log in or sign up.")


restore_session()
navigation()

page = st.session_state.get("page", "home")
logged_in = "token" in st.session_state

if page in ("login", "signup") and logged_in:
    page = "home"

if page == "login":
    login_page()
elif page == "signup":
    signup_page()
elif page == "products":
    products_page()
elif page == "admin":
    admin_products_page()
else:
    home_page()
