# contact/routes/contact_router.py
import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.core.database import get_db
from backend.auth.utils.permissions import require_admin
from backend.contact.schemas.contact_schemas import MessageCreate, MessageOut, MessageStatusUpdate
from backend.contact.services.contact_service import (
    actualizar_estado, borrar_mensaje, guardar_mensaje, listar_mensajes,
)

logger = logging.getLogger(__name__)

contact_router = APIRouter(prefix="/contact", tags=["contact"])


# público: no requiere sesión
@contact_router.post("", response_model=MessageOut, status_code=201)
async def send_message(payload: MessageCreate, db=Depends(get_db)):
    doc = await guardar_mensaje(db, payload.model_dump())
    logger.info("Contact message received", extra={"resource": "contact", "item_id": doc["id"]})
    return doc


@contact_router.get("", response_model=list[MessageOut],
                    dependencies=[Depends(require_admin())])
async def get_messages(db=Depends(get_db)):
    return await listar_mensajes(db)


@contact_router.put("/{message_id}", response_model=MessageOut,
                    dependencies=[Depends(require_admin())])
async def update_message(message_id: str, payload: MessageStatusUpdate, db=Depends(get_db)):
    doc = await actualizar_estado(db, message_id, payload.status)
    if not doc:
        raise HTTPException(status_code=404, detail="Message not found")
    return doc


@contact_router.delete("/{message_id}", dependencies=[Depends(require_admin())])
async def delete_message(message_id: str, db=Depends(get_db)):
    if not await borrar_mensaje(db, message_id):
        raise HTTPException(status_code=404, detail="Message not found")
    return {"message": "Message deleted", "id": message_id}
