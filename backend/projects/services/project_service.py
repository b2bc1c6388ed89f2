# projects/services/project_service.py
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from backend.core.documents import (
    DESCENDING, delete_document, get_document, insert_document, list_documents,
    update_document,
)

COLLECTION = "projects"


async def listar_proyectos(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    # más nuevos primero
    return await list_documents(db, COLLECTION, DESCENDING)


async def obtener_proyecto(db: AsyncIOMotorDatabase, project_id: str) -> Optional[Dict[str, Any]]:
    return await get_document(db, COLLECTION, project_id)


async def crear_proyecto(db: AsyncIOMotorDatabase, data: Dict[str, Any]) -> Dict[str, Any]:
    return await insert_document(db, COLLECTION, data)


async def actualizar_proyecto(
    db: AsyncIOMotorDatabase, project_id: str, data: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    return await update_document(db, COLLECTION, project_id, data)


async def borrar_proyecto(db: AsyncIOMotorDatabase, project_id: str) -> bool:
    return await delete_document(db, COLLECTION, project_id)
