# utils/menubar.py
from typing import Dict, List

from frontend.login.auth_state import AuthGate

DEFAULT_PAGE = "about"

# visibility: "all" | "admin" | "guest" (sólo sin sesión)
NAV_ITEMS: List[Dict[str, str]] = [
    {"id": "about", "label": "About", "icon": "👤", "visibility": "all"},
    {"id": "skills", "label": "Skills", "icon": "🛠️", "visibility": "all"},
    {"id": "projects", "label": "Projects", "icon": "📁", "visibility": "all"},
    {"id": "contact", "label": "Contact", "icon": "✉️", "visibility": "all"},
    {"id": "admin", "label": "Admin", "icon": "📋", "visibility": "admin"},
    {"id": "login", "label": "Login", "icon": "🔑", "visibility": "guest"},
]


def _allowed(item: Dict[str, str], gate: AuthGate) -> bool:
    vis = item.get("visibility", "all")
    if vis == "admin":
        return gate.is_admin()
    if vis == "guest":
        return not gate.is_authenticated
    return True


def visible_pages(gate: AuthGate) -> List[Dict[str, str]]:
    """Items del menú que el visitante actual puede ver."""
    if not gate.is_ready:
        return []
    return [item for item in NAV_ITEMS if _allowed(item, gate)]


def resolve_page(requested: str, gate: AuthGate) -> str:
    """
    Página que realmente se muestra. ``admin`` sin permisos -> ``login``;
    ``login`` con sesión -> ``about``; desconocida -> ``about``.
    """
    known = {item["id"]: item for item in NAV_ITEMS}
    item = known.get(requested)
    if item is None:
        return DEFAULT_PAGE
    if _allowed(item, gate):
        return requested
    if item["visibility"] == "admin":
        return "login" if not gate.is_authenticated else DEFAULT_PAGE
    return DEFAULT_PAGE


def page_after_login() -> str:
    return "admin"


def page_after_logout() -> str:
    return DEFAULT_PAGE
