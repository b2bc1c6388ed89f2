# views/projects_view.py
import streamlit as st

from frontend.sections.projects import ProjectsSection
from frontend.views.common import delete_confirmation, inline_messages


def render(section: ProjectsSection) -> None:
    head, action = st.columns([4, 1])
    with head:
        st.title("Projects")
    is_admin = section.gate.is_admin()
    if is_admin:
        with action:
            if st.button("Add Project", type="primary"):
                section.open_create()
                st.rerun()

    inline_messages(section, "projects")
    if section.error and not section.loaded:
        if st.button("Retry", key="projects_retry"):
            section.refresh()
            st.rerun()

    if section.buffer is not None:
        _render_form(section)
    delete_confirmation(section, "project", "projects")

    featured, regular = section.partition()
    if featured:
        st.header("Featured Projects")
        for project in featured:
            _project_card(section, project, is_admin)
    if regular:
        st.header("All Projects")
        for project in regular:
            _project_card(section, project, is_admin)
    if not section.items:
        st.info("No projects found.")


def _project_card(section: ProjectsSection, project: dict, is_admin: bool) -> None:
    with st.container(border=True):
        if project.get("image_url"):
            st.image(project["image_url"], use_container_width=True)
        title = project.get("title", "")
        st.subheader(f"⭐ {title}" if project.get("featured") else title)
        st.write(project.get("description", ""))
        if project.get("tech_stack"):
            st.caption(" · ".join(project["tech_stack"]))
        links = []
        if project.get("github"):
            links.append(f"[GitHub]({project['github']})")
        if project.get("live_demo"):
            links.append(f"[Live Demo]({project['live_demo']})")
        if links:
            st.markdown(" | ".join(links))
        if project.get("created_at"):
            st.caption(f"Created: {str(project['created_at'])[:10]}")
        if is_admin:
            c1, c2 = st.columns(2)
            if c1.button("Edit", key=f"project_edit_{project['id']}"):
                section.open_edit(project["id"])
                st.rerun()
            if c2.button("Delete", key=f"project_del_{project['id']}"):
                section.request_delete(project["id"])
                st.rerun()


def _render_form(section: ProjectsSection) -> None:
    buf = section.buffer
    busy = section.is_busy(buf.item_id)
    with st.form("project_form"):
        st.markdown("### " + ("Add New Project" if buf.is_new else "Edit Project"))
        title = st.text_input("Title *", value=buf.get("title", ""))
        description = st.text_area("Description *", value=buf.get("description", ""))
        tech_stack = st.text_input("Tech Stack (comma separated) *", value=buf.get("tech_stack", ""),
                                   placeholder="React, Node.js, MongoDB")
        github = st.text_input("GitHub URL *", value=buf.get("github", ""))
        live_demo = st.text_input("Live Demo URL", value=buf.get("live_demo", ""))
        image_url = st.text_input("Image URL", value=buf.get("image_url", ""))
        featured = st.checkbox("Featured Project", value=bool(buf.get("featured", False)))
        c1, c2 = st.columns(2)
        with c1:
            submit = st.form_submit_button("Add Project" if buf.is_new else "Update Project",
                                           type="primary", disabled=busy)
        with c2:
            cancel = st.form_submit_button("Cancel")

    if cancel:
        section.cancel_edit()
        st.rerun()
    if submit:
        for name, value in (("title", title), ("description", description),
                            ("tech_stack", tech_stack), ("github", github),
                            ("live_demo", live_demo), ("image_url", image_url),
                            ("featured", featured)):
            buf.set(name, value)
        with st.spinner("Saving…"):
            section.save()
        st.rerun()
