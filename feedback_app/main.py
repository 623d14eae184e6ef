# feedback_app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from feedback_app.core.config import settings
from feedback_app.core.errors import AppError
from feedback_app.core.logging import configure_logging
from feedback_app.db.session import engine, SessionLocal
from feedback_app.db.base import Base

# Import models so SQLAlchemy knows about them (for create_all)
from feedback_app.models.user import User  # noqa: F401
from feedback_app.models.survey import Survey  # noqa: F401
from feedback_app.models.feedback import Feedback  # noqa: F401

# Routers
from feedback_app.api.routes import router as api_router
from feedback_app.api.survey_routes import router as survey_router
from feedback_app.api.feedback_routes import router as feedback_router
from feedback_app.api.analytics_routes import router as analytics_router

# Seeder
from feedback_app.db.seed import seed_admin

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=headers)

    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Ensure tables exist (no migrations; schema comes from the models)
    Base.metadata.create_all(bind=engine)

    # Optional first admin from .env
    with SessionLocal() as db:
        if seed_admin(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD):
            logger.info("seeded admin account %s", settings.ADMIN_EMAIL)

    # API routes
    app.include_router(api_router)          # /health, /auth/*
    app.include_router(survey_router)       # /surveys/*
    app.include_router(feedback_router)     # /feedback/{survey_id}
    app.include_router(analytics_router)    # /analytics/*

    logger.info("%s started (env=%s)", settings.APP_NAME, settings.APP_ENV)
    return app


app = create_app()
