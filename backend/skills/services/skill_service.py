# skills/services/skill_service.py
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from backend.core.documents import (
    ASCENDING, delete_document, insert_document, list_documents, update_document,
)

COLLECTION = "skills"


async def listar_skills(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    # orden de carga: las nuevas van al final
    return await list_documents(db, COLLECTION, ASCENDING)


async def crear_skill(db: AsyncIOMotorDatabase, data: Dict[str, Any]) -> Dict[str, Any]:
    return await insert_document(db, COLLECTION, data)


async def actualizar_skill(
    db: AsyncIOMotorDatabase, skill_id: str, data: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    return await update_document(db, COLLECTION, skill_id, data)


async def borrar_skill(db: AsyncIOMotorDatabase, skill_id: str) -> bool:
    return await delete_document(db, COLLECTION, skill_id)
