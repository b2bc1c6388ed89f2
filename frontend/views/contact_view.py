# views/contact_view.py
import streamlit as st

from frontend.sections.contact import STATUSES, ContactSection
from frontend.views.common import delete_confirmation, inline_messages


def render(section: ContactSection) -> None:
    st.title("Contact Me")
    inline_messages(section, "contact")

    st.subheader("Send me a message")
    busy = section.is_busy("__send__")
    with st.form("contact_form", clear_on_submit=False):
        name = st.text_input("Name *", value=section.form["name"])
        email = st.text_input("Email *", value=section.form["email"])
        message = st.text_area("Message *", value=section.form["message"], height=150)
        send = st.form_submit_button("Sending…" if busy else "Send Message",
                                     type="primary", disabled=busy)
    if send:
        section.form = {"name": name, "email": email, "message": message}
        with st.spinner("Sending…"):
            section.send()
        st.rerun()

    if section.gate.is_admin():
        st.divider()
        _render_inbox(section)


def _render_inbox(section: ContactSection) -> None:
    st.subheader(f"Received Messages ({section.unread_count()} unread)")
    delete_confirmation(section, "message", "contact")
    if not section.items:
        st.info("No messages yet.")
        return
    for msg in section.items:
        with st.container(border=True):
            st.markdown(f"**{msg.get('name', '')}** · {msg.get('email', '')} · `{msg.get('status')}`")
            st.write(msg.get("message", ""))
            if msg.get("created_at"):
                st.caption(str(msg["created_at"])[:16].replace("T", " "))
            cols = st.columns(len(STATUSES) + 1)
            for col, status in zip(cols, STATUSES):
                if status == msg.get("status"):
                    continue
                if col.button(f"Mark {status}", key=f"msg_{status}_{msg['id']}",
                              disabled=section.is_busy(msg["id"])):
                    section.set_status(msg["id"], status)
                    st.rerun()
            if cols[-1].button("Delete", key=f"msg_del_{msg['id']}"):
                section.request_delete(msg["id"])
                st.rerun()
