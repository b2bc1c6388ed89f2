# contact/schemas/contact_schemas.py
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class MessageStatus(str, Enum):
    unread = "unread"
    read = "read"
    replied = "replied"


class MessageCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=120)
    email: EmailStr
    message: str = Field(min_length=1, max_length=5000)


class MessageStatusUpdate(BaseModel):
    status: MessageStatus


class MessageOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    message: str
    status: MessageStatus = MessageStatus.unread
    created_at: datetime
