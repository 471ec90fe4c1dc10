# app/lifecycle.py
import logging
from fastapi import FastAPI

from app.dependencies import init_repositories

logger = logging.getLogger(__name__)


def register_lifecycle(app: FastAPI) -> None:
    @app.on_event("startup")
    def on_startup() -> None:
        logger.info("Application startup begin")
        init_repositories(app)
        logger.info("Application startup completed")

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        logger.info("Application shutdown begin")

        # in-memory store: nothing to flush, cases are dropped with the process
        count = app.state.case_repo.count() if getattr(app.state, "case_repo", None) else 0
        logger.info("Application shutdown completed", extra={"props": {"cases_dropped": count}})
