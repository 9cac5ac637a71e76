# app/main.py

import streamlit as st
from dotenv import load_dotenv
from app.ui.login import login_page, logout
from app.ui.thoughts import thoughts_page


load_dotenv()


def main_page():
    st.sidebar.markdown(f"## 👋 {st.session_state['username']}")

    if st.sidebar.button("🔓 Log out"):
        logout()
        st.session_state.clear()
        st.rerun()

    thoughts_page()


if "access_token" not in st.session_state:
    login_page()
else:
    main_page()
