# auth/services/auth_service.py
from datetime import datetime, timedelta, timezone
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from backend.core.config import get_settings
from backend.core.database import get_db
from backend.user.models.user import User
from backend.user.services.user_service import get_user_by_email, get_user_by_id, verify_password


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


async def authenticate_user(db, email: str, password: str):
    user = await get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db=Depends(get_db),
) -> User:
    cfg = get_settings()
    credentials_exc = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, cfg.JWT_SECRET_KEY,
                             algorithms=[cfg.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired", headers={
                            "WWW-Authenticate": "Bearer"})
    except jwt.InvalidTokenError:
        raise credentials_exc

    sub = payload.get("sub")
    if sub is None:
        raise credentials_exc

    user = await get_user_by_id(db, sub)
    if user is None or not user.is_active:
        raise credentials_exc
    return user


def create_access_token(subject: str) -> str:
    cfg = get_settings()
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=cfg.JWT_ACCESS_EXPIRES_MIN)
    payload = {
        "sub": subject,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, cfg.JWT_SECRET_KEY, algorithm=cfg.JWT_ALGORITHM)
