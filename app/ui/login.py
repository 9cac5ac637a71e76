# app/ui/login.py

import os
import streamlit as st
from dotenv import load_dotenv
from streamlit_cookies_manager import EncryptedCookieManager
from app.services.api import login_user, register_user

load_dotenv()

COOKIE_PASSWORD = os.getenv("COOKIE_PASSWORD", "change-me")

cookies = EncryptedCookieManager(prefix="happy-thoughts/", password=COOKIE_PASSWORD)
if not cookies.ready():
    st.stop()


def remember(username, access_token):
    st.session_state["access_token"] = access_token
    st.session_state["username"] = username
    cookies["access_token"] = access_token
    cookies["username"] = username
    cookies.save()


def logout():
    for key in ("access_token", "username"):
        if key in cookies:
            del cookies[key]
    cookies.save()


def login_page():
    st.title("🔐 Log in")

    if "access_token" not in st.session_state:
        if cookies.get("access_token"):
            st.session_state["access_token"] = cookies["access_token"]
            st.session_state["username"] = cookies["username"]
            st.rerun()

    if "show_register" not in st.session_state:
        st.session_state["show_register"] = False

    if st.session_state["show_register"]:
        show_register_form()
    else:
        show_login_form()


def show_login_form():
    with st.form("login_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in")

    if submitted:
        with st.spinner("Logging in..."):
            result = login_user(username, password)
        if result.get("success"):
            user = result["response"]
            remember(user["username"], user["accessToken"])
            st.success("✅ Logged in!")
            st.rerun()
        else:
            st.error(f"❌ Login failed: {result.get('response')}")

    if st.button("Sign up"):
        st.session_state["show_register"] = True
        st.rerun()


def show_register_form():
    st.subheader("📝 Sign up")

    new_user = st.text_input("Username", key="new_user")
    new_pass = st.text_input("Password (at least 8 characters)", type="password", key="new_pass")

    if st.button("Create account"):
        with st.spinner("Creating account..."):
            result = register_user(new_user, new_pass)
        if result.get("success"):
            user = result["response"]
            remember(user["username"], user["accessToken"])
            st.session_state["show_register"] = False
            st.rerun()
        else:
            st.error(f"❌ Sign up failed: {result.get('response')}")

    if st.button("← Back to log in"):
        st.session_state["show_register"] = False
        st.rerun()
