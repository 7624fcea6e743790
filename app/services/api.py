# app/services/api.py

import os
import logging
import requests
from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)

API_URL = os.getenv("API_URL", "http://localhost:5000")
TIMEOUT = 10


def _auth_headers(token):
    # the server verifies the raw header value, no "Bearer " prefix
    return {"Authorization": token} if token else {}


def _error(res, fallback):
    try:
        return {"error": res.json().get("message", fallback)}
    except ValueError:
        return {"error": f"{fallback} (status {res.status_code})"}


# -------------------------
# Authentication
# -------------------------

def signup(name, email, password):
    """
    Registers a new user. Returns the server message or {"error": ...}.
    """
    try:
        res = requests.post(
            f"{API_URL}/api/signup",
            json={"name": name, "email": email, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error during signup: {e}")
        return {"error": str(e)}

    if res.status_code == 201:
        return res.json()
    return _error(res, "Signup failed")


def login(email, password):
    """
    Logs in and returns {"token": ...} or {"error": ...}.
    """
    try:
        res = requests.post(
            f"{API_URL}/api/login",
            json={"email": email, "password": password},
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error during login: {e}")
        return {"error": str(e)}

    if res.status_code == 200:
        return res.json()
    return _error(res, "Login failed")


def check_admin_status(token) -> bool:
    """
    Asks the server whether the current user is an admin.
    Anything other than a 200 answer counts as "not an admin".
    """
    try:
        res = requests.get(f"{API_URL}/api/checkAdmin", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Error checking admin status: {e}")
        return False

    if res.status_code != 200:
        logger.warning(f"Failed to check admin status: {res.status_code}")
        return False
    return bool(res.json().get("isAdmin", False))


# -------------------------
# Products
# -------------------------

def fetch_products(token):
    try:
        res = requests.get(f"{API_URL}/api/products", headers=_auth_headers(token), timeout=TIMEOUT)
    except requests.RequestException as e:
        logger.error(f"Error fetching products: {e}")
        return {"error": str(e)}

    if res.status_code != 200:
        return _error(res, "Failed to fetch products")
    data = res.json()
    return data if isinstance(data, list) else []


def add_product(token, product):
    try:
        res = requests.post(
            f"{API_URL}/api/products",
            json=product,
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error during product addition: {e}")
        return {"error": str(e)}

    if res.status_code == 201:
        return res.json()
    return _error(res, "Product addition failed")


def update_product(token, product_id, product):
    try:
        res = requests.put(
            f"{API_URL}/api/products/{product_id}",
            json=product,
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error during product update: {e}")
        return {"error": str(e)}

    if res.status_code == 200:
        return res.json()
    return _error(res, "Product update failed")


def delete_product(token, product_id):
    try:
        res = requests.delete(
            f"{API_URL}/api/products/{product_id}",
            headers=_auth_headers(token),
            timeout=TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"Error during product deletion: {e}")
        return {"error": str(e)}

    if res.status_code == 200:
        return res.json()
    return _error(res, "Product deletion failed")
