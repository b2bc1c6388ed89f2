from pydantic import BaseModel, EmailStr

from backend.user.models.user import Role


class UserPublic(BaseModel):
    """What the API tells a client about the logged-in account."""
    email: EmailStr
    role: Role
