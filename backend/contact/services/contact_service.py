# contact/services/contact_service.py
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorDatabase

from backend.contact.schemas.contact_schemas import MessageStatus
from backend.core.documents import (
    DESCENDING, delete_document, insert_document, list_documents, update_document,
)

COLLECTION = "messages"


async def guardar_mensaje(db: AsyncIOMotorDatabase, data: Dict[str, Any]) -> Dict[str, Any]:
    """Mensaje público del formulario de contacto; siempre entra como ``unread``."""
    doc = {
        "name": data["name"],
        "email": str(data["email"]).lower(),
        "message": data["message"],
        "status": MessageStatus.unread.value,
    }
    return await insert_document(db, COLLECTION, doc)


async def listar_mensajes(db: AsyncIOMotorDatabase) -> List[Dict[str, Any]]:
    return await list_documents(db, COLLECTION, DESCENDING)


async def actualizar_estado(
    db: AsyncIOMotorDatabase, message_id: str, status: MessageStatus
) -> Optional[Dict[str, Any]]:
    return await update_document(db, COLLECTION, message_id, {"status": status.value})


async def borrar_mensaje(db: AsyncIOMotorDatabase, message_id: str) -> bool:
    return await delete_document(db, COLLECTION, message_id)
