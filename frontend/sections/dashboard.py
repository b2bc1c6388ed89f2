# sections/dashboard.py
import logging
from typing import Dict, Optional

from frontend.login.auth_state import AuthGate
from frontend.utils.api_client import ApiError

logger = logging.getLogger(__name__)


def _empty_stats() -> Dict[str, int]:
    return {"projects": 0, "skills": 0, "messages": 0, "unread_messages": 0}


class DashboardSection:
    """Contadores del panel admin."""

    def __init__(self, projects_api, skills_api, contact_api, gate: AuthGate):
        self.projects_api = projects_api
        self.skills_api = skills_api
        self.contact_api = contact_api
        self.gate = gate
        self.stats = _empty_stats()
        self.error: Optional[str] = None

    def mount(self) -> None:
        self.refresh()

    def refresh(self) -> None:
        self.stats = _empty_stats()
        if not self.gate.is_admin():
            self.error = "Admin session required"
            return
        try:
            projects = self.projects_api.get_all()
            skills = self.skills_api.get_all()
            messages = self.contact_api.get_all()
        except ApiError as e:
            logger.warning("Failed to fetch stats: %s", e)
            self.error = f"Failed to fetch stats: {e.message}"
            return
        self.stats = {
            "projects": len(projects),
            "skills": len(skills),
            "messages": len(messages),
            "unread_messages": sum(1 for m in messages if m.get("status") == "unread"),
        }
        self.error = None
