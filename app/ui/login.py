# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from services.api import login, signup, check_admin_status
from ui.products import refresh_products

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "insecure-development-cookie-key")

cookies = EncryptedCookieManager(prefix="product-catalog/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def restore_session():
    """
    Restores the token saved in the cookie store after a page reload.
    """
    if "token" in st.session_state:
        return
    token = cookies.get("token")
    if token:
        start_session(cookies.get("email", ""), token, persist=False)


def start_session(email, token, persist=True):
    st.session_state["token"] = token
    st.session_state["email"] = email
    st.session_state["is_admin"] = check_admin_status(token)
    if persist:
        cookies["token"] = token
        cookies["email"] = email
        cookies.save()
    refresh_products()


def logout():
    for key in ("token", "email", "name", "password", "products", "is_admin", "editing"):
        st.session_state.pop(key, None)
    if "token" in cookies:
        del cookies["token"]
    if "email" in cookies:
        del cookies["email"]
    cookies.save()
    st.session_state["page"] = "home"


def _do_login(email, password):
    result = login(email, password)
    if result.get("error"):
        st.error(f"❌ Login failed: {result['error']}")
        return False
    start_session(email, result["token"])
    return True


def login_page():
    st.title("🔐 Login")

    with st.form("login_form"):
        email = st.text_input("Email", value=st.session_state.get("email", ""))
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        with st.spinner("Logging in..."):
            if _do_login(email, password):
                st.session_state["page"] = "home"
                st.rerun()


def signup_page():
    st.title("📝 Signup")

    with st.form("signup_form"):
        name = st.text_input("Name")
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Signup")

    if submitted:
        with st.spinner("Creating account..."):
            result = signup(name, email, password)
            if result.get("error"):
                st.error(f"❌ Signup failed: {result['error']}")
                return
            # a fresh account goes straight to a logged-in session
            if _do_login(email, password):
                st.session_state["page"] = "home"
                st.rerun()
