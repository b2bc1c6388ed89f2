# app.py  ->  streamlit run frontend/app.py
import logging
import sys
import time
from pathlib import Path

import extra_streamlit_components as stx
import streamlit as st

ROOT = Path(__file__).parent.parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.context import AppContext, build_context  # noqa: E402
from frontend.login.auth_ui import login_panel, sidebar_user_box  # noqa: E402
from frontend.login.token_store import CookieTokenStore  # noqa: E402
from frontend.utils.menubar import (  # noqa: E402
    page_after_login, page_after_logout, resolve_page, visible_pages,
)
from frontend.utils.settings import get_settings  # noqa: E402
from frontend.views import (  # noqa: E402
    about_view, admin_view, contact_view, projects_view, skills_view,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

st.set_page_config(page_title="Portfolio", layout="wide")

MAX_COOKIE_WAIT = 3

VIEWS = {
    "about": about_view.render,
    "skills": skills_view.render,
    "projects": projects_view.render,
    "contact": contact_view.render,
    "admin": admin_view.render,
}


def _get_api_base() -> str:
    # secrets > env > fallback
    try:
        secret = st.secrets.get("API_BASE")
    except FileNotFoundError:
        secret = None
    return (secret or get_settings().api_base).rstrip("/")


def _get_context(cookies) -> AppContext:
    if "ctx" not in st.session_state:
        st.session_state["ctx"] = build_context(base_url=_get_api_base(), cookie_manager=cookies)
        st.session_state["page"] = "about"
        st.session_state["mounted_page"] = None
    ctx = st.session_state["ctx"]
    if isinstance(ctx.gate.store, CookieTokenStore):
        ctx.gate.store.bind(cookies)
    return ctx


def _cookies_ready(store) -> bool:
    """El componente de cookies contesta recién en una corrida posterior."""
    if not isinstance(store, CookieTokenStore) or store.is_loaded():
        return True
    waited = st.session_state.get("cookie_wait", 0)
    st.session_state["cookie_wait"] = waited + 1
    # navegador sin cookies: no esperar para siempre
    return waited >= MAX_COOKIE_WAIT


def _go(page: str) -> None:
    st.session_state["page"] = page
    st.rerun()


def _sidebar_nav(ctx: AppContext, current: str) -> None:
    st.sidebar.title("Portfolio")
    for item in visible_pages(ctx.gate):
        label = f"{item['icon']} {item['label']}"
        if st.sidebar.button(label, key=f"nav_{item['id']}", use_container_width=True,
                             type="primary" if item["id"] == current else "secondary"):
            _go(item["id"])


def _mount(ctx: AppContext, page: str):
    """Desmonta la sección anterior y monta la nueva sólo al cambiar de página."""
    previous = st.session_state.get("mounted_page")
    if previous == page:
        return ctx.section(page)
    if previous in VIEWS:
        old = ctx.section(previous)
        if hasattr(old, "unmount"):
            old.unmount()
    section = ctx.section(page)
    with st.spinner("Loading…"):
        section.mount()
    st.session_state["mounted_page"] = page
    return section


ctx = _get_context(stx.CookieManager(key="portfolio_cookies"))
gate = ctx.gate

# Nada más que el placeholder hasta resolver la sesión guardada
if not gate.is_ready:
    with st.spinner("Loading…"):
        if not _cookies_ready(gate.store):
            time.sleep(0.3)
            st.rerun()
        gate.initialize()
    st.rerun()

page = resolve_page(st.session_state.get("page", "about"), gate)
_sidebar_nav(ctx, page)
if sidebar_user_box(gate):
    st.session_state["mounted_page"] = None
    _go(page_after_logout())

if page == "login":
    if login_panel(gate):
        st.session_state["mounted_page"] = None
        _go(page_after_login())
else:
    VIEWS[page](_mount(ctx, page))

st.divider()
st.caption("© Portfolio. Built with Streamlit & FastAPI")
