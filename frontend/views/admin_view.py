# views/admin_view.py
import streamlit as st

from frontend.sections.dashboard import DashboardSection


def render(section: DashboardSection) -> None:
    head, action = st.columns([4, 1])
    with head:
        st.title("Admin Dashboard")
    with action:
        if st.button("🔄 Refresh"):
            section.refresh()

    if section.error:
        st.error(section.error)

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Projects", section.stats["projects"])
    c2.metric("Skills", section.stats["skills"])
    c3.metric("Messages", section.stats["messages"])
    c4.metric("Unread", section.stats["unread_messages"])

    st.caption("Use the Skills, Projects, About and Contact pages to edit content inline.")
