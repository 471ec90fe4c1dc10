from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import RequestLoggingMiddleware
from app.api.health import router as health_router
from app.api.router import api_router
from app.repositories.base import EmergencyCaseRepository


def create_app(case_repo: Optional[EmergencyCaseRepository] = None) -> FastAPI:
    """
    Build the application. A repository passed in here is used as-is
    (tests hand in a fresh store); otherwise startup creates one.
    """
    setup_logging()

    app = FastAPI(title=settings.app_name)
    app.state.case_repo = case_repo

    # -------------------------
    # Middleware
    # -------------------------
    app.add_middleware(RequestLoggingMiddleware)

    origins = [o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------
    # Errors
    # -------------------------
    register_exception_handlers(app)

    # -------------------------
    # Routers
    # -------------------------
    app.include_router(api_router, prefix=settings.api_prefix)

    # -------------------------
    # Health
    # -------------------------
    app.include_router(health_router, prefix="/health")

    # -------------------------
    # Root
    # -------------------------
    @app.get("/", tags=["root"])
    def root():
        return {
            "status": "ok",
            "service": settings.app_name,
            "api_prefix": settings.api_prefix,
            "storage": "in-memory",
        }

    return app
