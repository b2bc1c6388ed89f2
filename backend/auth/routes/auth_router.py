# auth/routes/auth_router.py
import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field

from backend.core.database import get_db
from backend.auth.services.auth_service import authenticate_user, create_access_token, get_current_user
from backend.user.models.user import User
from backend.user.schemas.user import UserPublic

logger = logging.getLogger(__name__)

auth_router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    token: str
    user: UserPublic


class VerifyResponse(BaseModel):
    user: UserPublic


@auth_router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db=Depends(get_db)) -> dict[str, Any]:
    email = payload.email.strip().lower()
    user = await authenticate_user(db, email, payload.password)
    if not user or not user.is_active:
        # mensaje genérico para evitar user-enumeration
        logger.info("Rejected login", extra={"email": email})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(user.id)
    return {
        "token": token,
        "user": {"email": user.email, "role": user.role},
    }


@auth_router.get("/verify", response_model=VerifyResponse)
async def verify(current_user: User = Depends(get_current_user)):
    return {"user": {"email": current_user.email, "role": current_user.role}}
