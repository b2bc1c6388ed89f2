# main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")

from backend.core.config import get_settings  # noqa: E402
from backend.core.database import get_database  # noqa: E402
from backend.core.errors import register_error_handlers  # noqa: E402
from backend.core.logging_config import setup_logging  # noqa: E402
from backend.core.startup import ensure_indexes, seed_admin  # noqa: E402
from backend.auth.routes.auth_router import auth_router  # noqa: E402
from backend.about.routes.about_router import about_router  # noqa: E402
from backend.skills.routes.skill_router import skill_router  # noqa: E402
from backend.projects.routes.project_router import project_router  # noqa: E402
from backend.contact.routes.contact_router import contact_router  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg = get_settings()
    setup_logging(cfg.LOG_LEVEL, cfg.LOG_FORMAT)
    db = get_database()
    try:
        await db.command("ping")
        await ensure_indexes(db)
        await seed_admin(db)
        logger.info("Mongo OK (startup) + indexes ready")
    except Exception as e:
        # No bloquees el arranque si la DB no está: logueá y seguí
        logger.error("Mongo unavailable at startup: %s; continuing", e)
    yield


def create_app() -> FastAPI:
    cfg = get_settings()
    app = FastAPI(title="Portfolio API", lifespan=lifespan)

    app.include_router(auth_router, prefix="/api")
    app.include_router(about_router, prefix="/api")
    app.include_router(skill_router, prefix="/api")
    app.include_router(project_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok", "env": cfg.ENVIRONMENT, "db": cfg.MONGO_DATABASE}

    return app


app = create_app()
