# about/routes/about_router.py
from fastapi import APIRouter, Depends

from backend.core.database import get_db
from backend.auth.utils.permissions import require_admin
from backend.about.schemas.about_schemas import AboutIn, AboutOut
from backend.about.services.about_service import actualizar_about, obtener_about

about_router = APIRouter(prefix="/about", tags=["about"])


@about_router.get("", response_model=AboutOut)
async def get_about(db=Depends(get_db)):
    return await obtener_about(db)


@about_router.put("", response_model=AboutOut, dependencies=[Depends(require_admin())])
async def update_about(payload: AboutIn, db=Depends(get_db)):
    return await actualizar_about(db, payload.model_dump())
