from enum import Enum
from pydantic import BaseModel, EmailStr
from typing import Optional


class Role(str, Enum):
    """Closed set of roles. Only ``admin`` may change content."""
    admin = "admin"
    user = "user"


class User(BaseModel):
    id: Optional[str] = None
    email: EmailStr
    password_hash: str
    is_active: bool = True
    role: Role = Role.user
