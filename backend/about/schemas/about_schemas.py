# about/schemas/about_schemas.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class AboutIn(BaseModel):
    bio: str = ""
    interests: List[str] = Field(default_factory=list)
    experience: str = ""
    education: str = ""
    location: str = ""
    resume_url: str = ""


class AboutOut(AboutIn):
    id: str
    updated_at: Optional[datetime] = None
