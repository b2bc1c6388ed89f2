# sections/projects.py
from typing import Any, Dict, List, Tuple

from frontend.sections.base import CollectionSection


class ProjectsSection(CollectionSection):
    noun = "project"
    editable = ("title", "description", "tech_stack", "github",
                "live_demo", "image_url", "featured")
    defaults = {
        "title": "",
        "description": "",
        "tech_stack": [],
        "github": "",
        "live_demo": "",
        "image_url": "",
        "featured": False,
    }
    required = ("title", "description", "tech_stack", "github")
    list_fields = ("tech_stack",)
    insert_at = "start"

    def partition(self) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """(destacados, resto), cada uno en el orden de la colección."""
        featured = [p for p in self.items if p.get("featured")]
        regular = [p for p in self.items if not p.get("featured")]
        return featured, regular
