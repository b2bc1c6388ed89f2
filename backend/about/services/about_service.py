# about/services/about_service.py
from typing import Any, Dict
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from backend.about.schemas.about_schemas import AboutIn
from backend.core.documents import doc_out, utcnow

COLLECTION = "about"
# un solo documento; se identifica por esta clave
SINGLETON = {"key": "about"}


def _out(doc: Dict[str, Any]) -> Dict[str, Any]:
    out = doc_out(doc)
    out.pop("key", None)
    return out


async def obtener_about(db: AsyncIOMotorDatabase) -> Dict[str, Any]:
    """Devuelve el About; si todavía no existe lo crea vacío."""
    doc = await db[COLLECTION].find_one(SINGLETON)
    if doc is None:
        doc = {**SINGLETON, **AboutIn().model_dump(), "updated_at": None}
        res = await db[COLLECTION].insert_one(doc)
        doc["_id"] = res.inserted_id
    return _out(doc)


async def actualizar_about(db: AsyncIOMotorDatabase, data: Dict[str, Any]) -> Dict[str, Any]:
    interests = [str(i).strip() for i in data.get("interests") or [] if str(i).strip()]
    fields = {**data, "interests": interests, "updated_at": utcnow()}
    doc = await db[COLLECTION].find_one_and_update(
        SINGLETON,
        {"$set": fields},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return _out(doc)
