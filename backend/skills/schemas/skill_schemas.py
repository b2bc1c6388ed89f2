# skills/schemas/skill_schemas.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

SKILL_CATEGORIES = ["frontend", "backend", "database", "tools", "other"]


class SkillIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=100)
    icon_url: str = Field(min_length=1)
    # cualquier string; el cliente agrupa lo desconocido en "other"
    category: str = "other"
    proficiency: int = Field(default=3, ge=1, le=5)


class SkillOut(SkillIn):
    id: str
    created_at: datetime
