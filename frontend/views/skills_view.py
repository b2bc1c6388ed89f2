# views/skills_view.py
import streamlit as st

from frontend.sections.skills import DEFAULT_CATEGORY, SkillsSection, category_options, rating
from frontend.views.common import capitalize, delete_confirmation, inline_messages


def render(section: SkillsSection) -> None:
    head, action = st.columns([4, 1])
    with head:
        st.title("Skills")
    is_admin = section.gate.is_admin()
    if is_admin:
        with action:
            if st.button("Add Skill", type="primary"):
                section.open_create()
                st.rerun()

    inline_messages(section, "skills")
    if section.error and not section.loaded:
        if st.button("Retry", key="skills_retry"):
            section.refresh()
            st.rerun()

    if section.buffer is not None:
        _render_form(section)
    delete_confirmation(section, "skill", "skills")

    for category, skills in section.grouped():
        st.subheader(capitalize(category))
        cols = st.columns(4)
        for i, skill in enumerate(skills):
            with cols[i % 4]:
                with st.container(border=True):
                    if skill.get("icon_url"):
                        st.image(skill["icon_url"], width=48)
                    st.markdown(f"**{skill.get('name', '')}**")
                    st.caption(rating(skill))
                    if is_admin:
                        c1, c2 = st.columns(2)
                        if c1.button("Edit", key=f"skill_edit_{skill['id']}"):
                            section.open_edit(skill["id"])
                            st.rerun()
                        if c2.button("Delete", key=f"skill_del_{skill['id']}"):
                            section.request_delete(skill["id"])
                            st.rerun()

    if section.loaded and not section.items:
        st.info("No skills yet.")


def _render_form(section: SkillsSection) -> None:
    buf = section.buffer
    busy = section.is_busy(buf.item_id)
    current = buf.get("category") or DEFAULT_CATEGORY
    options = category_options(current)
    with st.form("skill_form"):
        st.markdown("### " + ("Add New Skill" if buf.is_new else "Edit Skill"))
        name = st.text_input("Name *", value=buf.get("name", ""))
        icon_url = st.text_input("Icon URL *", value=buf.get("icon_url", ""))
        category = st.selectbox("Category", options, index=options.index(current),
                                format_func=capitalize)
        proficiency = st.slider("Proficiency (1-5)", 1, 5, value=int(buf.get("proficiency", 3)))
        c1, c2 = st.columns(2)
        with c1:
            submit = st.form_submit_button("Add Skill" if buf.is_new else "Update Skill",
                                           type="primary", disabled=busy)
        with c2:
            cancel = st.form_submit_button("Cancel")

    if cancel:
        section.cancel_edit()
        st.rerun()
    if submit:
        buf.set("name", name)
        buf.set("icon_url", icon_url)
        buf.set("category", category)
        buf.set("proficiency", int(proficiency))
        with st.spinner("Saving…"):
            section.save()
        st.rerun()
