# projects/schemas/project_schemas.py
from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    tech_stack: List[str] = Field(min_length=1)
    github: str = Field(min_length=1)
    live_demo: str = ""
    image_url: str = ""
    featured: bool = False

    @field_validator("tech_stack")
    @classmethod
    def _drop_blank_tech(cls, v: List[str]) -> List[str]:
        items = [t.strip() for t in v if t and t.strip()]
        if not items:
            raise ValueError("at least one technology is required")
        return items


class ProjectOut(ProjectIn):
    id: str
    created_at: datetime
