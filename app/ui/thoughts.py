# app/ui/thoughts.py

from datetime import datetime
import streamlit as st
from app.services.api import list_thoughts, post_thought, like_thought


def _posted_at(value):
    try:
        return datetime.fromisoformat(value).strftime("%Y-%m-%d %H:%M")
    except (TypeError, ValueError):
        return ""


def thoughts_page():
    token = st.session_state["access_token"]
    username = st.session_state.get("username")

    st.markdown("# 💭 Happy Thoughts")

    with st.form("post_form", clear_on_submit=True):
        message = st.text_area("What's making you happy right now?", max_chars=140)
        submitted = st.form_submit_button("❤️ Send happy thought")

    if submitted:
        result = post_thought(token, username, message)
        if result.get("success"):
            st.rerun()
        else:
            st.error(f"❌ {result.get('response')}")

    thoughts = list_thoughts(token)
    if not thoughts:
        st.info("No thoughts yet.")
        return

    for thought in thoughts:
        with st.container(border=True):
            st.markdown(thought["message"])
            cols = st.columns([1, 5])
            with cols[0]:
                if st.button(f"❤️ x {thought['hearts']}", key=f"like_{thought['id']}"):
                    result = like_thought(token, thought["id"])
                    if not result.get("success"):
                        st.error(f"❌ {result.get('response')}")
                    st.rerun()
            with cols[1]:
                author = thought.get("username") or "anonymous"
                st.caption(f"{author} · {_posted_at(thought.get('createdAt'))}")
