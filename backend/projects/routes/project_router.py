# projects/routes/project_router.py
import logging
from fastapi import APIRouter, Depends, HTTPException

from backend.core.database import get_db
from backend.auth.utils.permissions import require_admin
from backend.projects.schemas.project_schemas import ProjectIn, ProjectOut
from backend.projects.services.project_service import (
    actualizar_proyecto, borrar_proyecto, crear_proyecto, listar_proyectos,
    obtener_proyecto,
)

logger = logging.getLogger(__name__)

project_router = APIRouter(prefix="/projects", tags=["projects"])


@project_router.get("", response_model=list[ProjectOut])
async def get_projects(db=Depends(get_db)):
    return await listar_proyectos(db)


@project_router.get("/{project_id}", response_model=ProjectOut)
async def get_project(project_id: str, db=Depends(get_db)):
    doc = await obtener_proyecto(db, project_id)
    if not doc:
        raise HTTPException(status_code=404, detail="Project not found")
    return doc


@project_router.post("", response_model=ProjectOut, status_code=201,
                     dependencies=[Depends(require_admin())])
async def create_project(payload: ProjectIn, db=Depends(get_db)):
    doc = await crear_proyecto(db, payload.model_dump())
    logger.info("Project created", extra={"resource": "projects", "item_id": doc["id"]})
    return doc


@project_router.put("/{project_id}", response_model=ProjectOut,
                    dependencies=[Depends(require_admin())])
async def update_project(project_id: str, payload: ProjectIn, db=Depends(get_db)):
    doc = await actualizar_proyecto(db, project_id, payload.model_dump())
    if not doc:
        raise HTTPException(status_code=404, detail="Project not found")
    return doc


@project_router.delete("/{project_id}", dependencies=[Depends(require_admin())])
async def delete_project(project_id: str, db=Depends(get_db)):
    if not await borrar_proyecto(db, project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    logger.info("Project deleted", extra={"resource": "projects", "item_id": project_id})
    return {"message": "Project deleted", "id": project_id}
