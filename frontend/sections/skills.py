# sections/skills.py
from typing import Any, Dict, List, Tuple

from frontend.sections.base import CollectionSection

CATEGORIES = ["frontend", "backend", "database", "tools", "other"]
DEFAULT_CATEGORY = "other"
MAX_PROFICIENCY = 5


class SkillsSection(CollectionSection):
    noun = "skill"
    editable = ("name", "icon_url", "category", "proficiency")
    defaults = {"name": "", "icon_url": "", "category": DEFAULT_CATEGORY, "proficiency": 3}
    required = ("name", "icon_url")
    insert_at = "end"

    def grouped(self) -> List[Tuple[str, List[Dict[str, Any]]]]:
        """[(categoría, skills)] en el orden fijo; categorías vacías se omiten."""
        groups: Dict[str, List[Dict[str, Any]]] = {c: [] for c in CATEGORIES}
        for skill in self.items:
            cat = skill.get("category")
            groups[cat if cat in groups else DEFAULT_CATEGORY].append(skill)
        return [(c, groups[c]) for c in CATEGORIES if groups[c]]


def category_options(current: str) -> List[str]:
    """Opciones del selector; una categoría guardada fuera de la lista se conserva."""
    if current and current not in CATEGORIES:
        return CATEGORIES + [current]
    return list(CATEGORIES)


def rating(skill: Dict[str, Any]) -> str:
    """proficiency=4 -> '★★★★☆'"""
    try:
        filled = int(skill.get("proficiency") or 0)
    except (TypeError, ValueError):
        filled = 0
    filled = max(0, min(MAX_PROFICIENCY, filled))
    return "★" * filled + "☆" * (MAX_PROFICIENCY - filled)
