# core/startup.py
import logging

from backend.core.config import get_settings
from backend.user.services.user_service import ensure_admin

logger = logging.getLogger(__name__)


async def ensure_indexes(db):
    await db["users"].create_index("email", unique=True)
    await db["skills"].create_index([("created_at", 1)])
    await db["projects"].create_index([("created_at", -1)])
    await db["messages"].create_index([("created_at", -1)])
    await db["about"].create_index("key", unique=True)


async def seed_admin(db) -> None:
    cfg = get_settings()
    if not (cfg.ADMIN_EMAIL and cfg.ADMIN_PASSWORD):
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set; no admin account seeded")
        return
    await ensure_admin(db, cfg.ADMIN_EMAIL, cfg.ADMIN_PASSWORD)
