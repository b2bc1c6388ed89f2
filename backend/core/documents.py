# core/documents.py
"""Small helpers shared by the content collections (skills, projects, contact)."""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

ASCENDING = 1
DESCENDING = -1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_object_id(item_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(item_id)
    except (InvalidId, TypeError):
        return None


def doc_out(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Mongo doc -> dict de salida con ``id`` string en lugar de ``_id``."""
    out = dict(doc)
    out["id"] = str(out.pop("_id"))
    return out


async def list_documents(
    db: AsyncIOMotorDatabase, collection: str, sort_dir: int = ASCENDING
) -> List[Dict[str, Any]]:
    cursor = db[collection].find({}).sort([("created_at", sort_dir), ("_id", sort_dir)])
    items: List[Dict[str, Any]] = []
    async for doc in cursor:
        items.append(doc_out(doc))
    return items


async def get_document(
    db: AsyncIOMotorDatabase, collection: str, item_id: str
) -> Optional[Dict[str, Any]]:
    oid = to_object_id(item_id)
    if oid is None:
        return None
    doc = await db[collection].find_one({"_id": oid})
    return doc_out(doc) if doc else None


async def insert_document(
    db: AsyncIOMotorDatabase, collection: str, data: Dict[str, Any]
) -> Dict[str, Any]:
    doc = {**data, "created_at": utcnow()}
    res = await db[collection].insert_one(doc)
    doc["_id"] = res.inserted_id
    return doc_out(doc)


async def update_document(
    db: AsyncIOMotorDatabase, collection: str, item_id: str, data: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """Aplica ``$set`` y devuelve el documento actualizado, o None si no existe."""
    oid = to_object_id(item_id)
    if oid is None:
        return None
    # id y created_at los asigna el servidor
    fields = {k: v for k, v in data.items() if k not in ("id", "_id", "created_at")}
    doc = await db[collection].find_one_and_update(
        {"_id": oid},
        {"$set": fields},
        return_document=ReturnDocument.AFTER,
    )
    return doc_out(doc) if doc else None


async def delete_document(db: AsyncIOMotorDatabase, collection: str, item_id: str) -> bool:
    oid = to_object_id(item_id)
    if oid is None:
        return False
    res = await db[collection].delete_one({"_id": oid})
    return res.deleted_count == 1
