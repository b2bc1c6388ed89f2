# views/about_view.py
import streamlit as st

from frontend.sections.about import AboutSection
from frontend.views.common import inline_messages


def render(section: AboutSection) -> None:
    st.title("About Me")
    inline_messages(section, "about")

    if section.editing:
        _render_form(section)
        return

    about = section.about
    if about.get("bio"):
        st.subheader("Bio")
        st.write(about["bio"])
    if about.get("interests"):
        st.subheader("Interests")
        st.write(" · ".join(about["interests"]))
    for field, title in (("experience", "Experience"), ("education", "Education"),
                         ("location", "Location")):
        if about.get(field):
            st.subheader(title)
            st.write(about[field])
    if about.get("resume_url"):
        st.link_button("Download Resume", about["resume_url"])

    if section.gate.is_admin():
        st.divider()
        if st.button("Edit About"):
            section.start_edit()
            st.rerun()


def _render_form(section: AboutSection) -> None:
    buf = section.buffer
    with st.form("about_form"):
        bio = st.text_area("Bio", value=buf.get("bio", ""), height=150)
        interests = st.text_input("Interests (comma separated)", value=buf.get("interests", ""))
        experience = st.text_area("Experience", value=buf.get("experience", ""))
        education = st.text_area("Education", value=buf.get("education", ""))
        location = st.text_input("Location", value=buf.get("location", ""))
        resume_url = st.text_input("Resume URL", value=buf.get("resume_url", ""))
        c1, c2 = st.columns(2)
        with c1:
            save = st.form_submit_button("Save", type="primary", disabled=section.saving)
        with c2:
            cancel = st.form_submit_button("Cancel")

    if cancel:
        section.cancel_edit()
        st.rerun()
    if save:
        for name, value in (("bio", bio), ("interests", interests), ("experience", experience),
                            ("education", education), ("location", location),
                            ("resume_url", resume_url)):
            buf.set(name, value)
        with st.spinner("Saving…"):
            _, err = section.save()
        if not err:
            st.toast("About updated", icon="✅")
        st.rerun()
