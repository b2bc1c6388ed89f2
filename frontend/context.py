# context.py
"""Arma el cliente, la sesión y las secciones de una sesión de UI."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from frontend.login.auth_client import AuthApi
from frontend.login.auth_state import AuthGate
from frontend.login.token_store import (
    CookieTokenStore, FileTokenStore, MemoryTokenStore, TokenStore,
)
from frontend.sections.about import AboutSection
from frontend.sections.contact import ContactSection
from frontend.sections.dashboard import DashboardSection
from frontend.sections.projects import ProjectsSection
from frontend.sections.skills import SkillsSection
from frontend.utils.api_client import ApiClient
from frontend.utils.api_content import AboutApi, ContactApi, ProjectsApi, SkillsApi
from frontend.utils.settings import FrontendSettings, get_settings


@dataclass
class AppContext:
    client: ApiClient
    gate: AuthGate
    about_api: AboutApi
    skills_api: SkillsApi
    projects_api: ProjectsApi
    contact_api: ContactApi
    sections: dict = field(default_factory=dict)

    def section(self, page: str):
        """Sección del ``page`` (se crea una vez y se reutiliza)."""
        if page not in self.sections:
            factories = {
                "about": lambda: AboutSection(self.about_api, self.gate),
                "skills": lambda: SkillsSection(self.skills_api, self.gate),
                "projects": lambda: ProjectsSection(self.projects_api, self.gate),
                "contact": lambda: ContactSection(self.contact_api, self.gate),
                "admin": lambda: DashboardSection(
                    self.projects_api, self.skills_api, self.contact_api, self.gate),
            }
            if page not in factories:
                raise KeyError(page)
            self.sections[page] = factories[page]()
        return self.sections[page]


def make_token_store(cfg: FrontendSettings, cookie_manager: Any = None) -> TokenStore:
    """Store según ``TOKEN_STORE``; sin cookie manager (fuera de Streamlit) queda en memoria."""
    if cfg.TOKEN_STORE == "file":
        return FileTokenStore(cfg.TOKEN_DIR, cfg.TOKEN_PROFILE)
    if cfg.TOKEN_STORE == "cookie" and cookie_manager is not None:
        return CookieTokenStore(cookie_manager, cfg.TOKEN_COOKIE, cfg.TOKEN_COOKIE_DAYS)
    return MemoryTokenStore()


def build_context(
    settings: Optional[FrontendSettings] = None,
    store: Optional[TokenStore] = None,
    session: Any = None,
    base_url: Optional[str] = None,
    cookie_manager: Any = None,
) -> AppContext:
    cfg = settings or get_settings()
    store = store or make_token_store(cfg, cookie_manager)
    client = ApiClient(base_url or cfg.api_base, session=session, timeout=cfg.API_TIMEOUT)
    gate = AuthGate(store, AuthApi(client))
    # el bearer sale de la sesión de este gate, nunca directo del store
    client.token_provider = gate.bearer
    client.add_auth_failure_listener(gate.handle_auth_failure)
    return AppContext(
        client=client,
        gate=gate,
        about_api=AboutApi(client),
        skills_api=SkillsApi(client),
        projects_api=ProjectsApi(client),
        contact_api=ContactApi(client),
    )
