# user/services/user_service.py
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from passlib.context import CryptContext

from backend.user.models.user import User, Role

logger = logging.getLogger(__name__)

_pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return _pwd.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return _pwd.verify(plain, hashed)

# ------------------ Helpers de mapeo ------------------


def _doc_to_user(doc: dict) -> User:
    """Devuelve el modelo interno User (con password_hash)."""
    return User(
        id=str(doc.get("_id")),
        email=doc["email"],
        password_hash=doc["password_hash"],
        is_active=doc.get("is_active", True),
        role=Role(doc.get("role", Role.user.value)),
    )

# ------------------ Queries para Auth ------------------


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> Optional[User]:
    doc = await db["users"].find_one({"email": (email or "").strip().lower()})
    return _doc_to_user(doc) if doc else None


async def get_user_by_id(db: AsyncIOMotorDatabase, user_id: str) -> Optional[User]:
    try:
        _id = ObjectId(user_id)
    except (InvalidId, TypeError):
        return None
    doc = await db["users"].find_one({"_id": _id})
    return _doc_to_user(doc) if doc else None


async def ensure_admin(db: AsyncIOMotorDatabase, email: str, password: str) -> bool:
    """
    Crea la cuenta admin si todavía no existe.
    Devuelve True si se insertó un documento nuevo.
    """
    email = (email or "").strip().lower()
    if await db["users"].find_one({"email": email}):
        return False
    await db["users"].insert_one({
        "email": email,
        "password_hash": hash_password(password),
        "is_active": True,
        "role": Role.admin.value,
    })
    logger.info("Seeded admin account", extra={"email": email})
    return True
