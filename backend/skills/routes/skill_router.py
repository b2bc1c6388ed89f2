# skills/routes/skill_router.py
import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.core.database import get_db
from backend.auth.utils.permissions import require_admin
from backend.skills.schemas.skill_schemas import SkillIn, SkillOut
from backend.skills.services.skill_service import (
    actualizar_skill, borrar_skill, crear_skill, listar_skills,
)

logger = logging.getLogger(__name__)

skill_router = APIRouter(prefix="/skills", tags=["skills"])


@skill_router.get("", response_model=list[SkillOut])
async def get_skills(db=Depends(get_db)):
    return await listar_skills(db)


@skill_router.post("", response_model=SkillOut, status_code=201,
                   dependencies=[Depends(require_admin())])
async def create_skill(payload: SkillIn, db=Depends(get_db)):
    doc = await crear_skill(db, payload.model_dump())
    logger.info("Skill created", extra={"resource": "skills", "item_id": doc["id"]})
    return doc


@skill_router.put("/{skill_id}", response_model=SkillOut,
                  dependencies=[Depends(require_admin())])
async def update_skill(skill_id: str, payload: SkillIn, db=Depends(get_db)):
    doc = await actualizar_skill(db, skill_id, payload.model_dump())
    if not doc:
        raise HTTPException(status_code=404, detail="Skill not found")
    return doc


@skill_router.delete("/{skill_id}", dependencies=[Depends(require_admin())])
async def delete_skill(skill_id: str, db=Depends(get_db)):
    if not await borrar_skill(db, skill_id):
        raise HTTPException(status_code=404, detail="Skill not found")
    logger.info("Skill deleted", extra={"resource": "skills", "item_id": skill_id})
    return {"message": "Skill deleted", "id": skill_id}
