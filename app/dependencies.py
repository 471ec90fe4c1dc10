# app/dependencies.py
import logging
from fastapi import FastAPI, HTTPException, Request

from app.core.config import settings
from app.repositories.base import EmergencyCaseRepository
from app.repositories.memory_repo import MemoryEmergencyCaseRepository
from app.services.case_simulator import CaseSimulator
from app.services.demo_loader import seed_demo_data

logger = logging.getLogger(__name__)


def init_repositories(app: FastAPI) -> None:
    """
    Initialize infrastructure dependencies.
    Must be idempotent: a repository injected through create_app is kept.
    """
    if getattr(app.state, "case_repo", None) is None:
        app.state.case_repo = MemoryEmergencyCaseRepository()
        logger.info("Repositories initialized")

    if settings.seed_demo_cases and app.state.case_repo.count() == 0:
        seed_demo_data(app.state.case_repo)


def get_case_repo(request: Request) -> EmergencyCaseRepository:
    case_repo = getattr(request.app.state, "case_repo", None)
    if case_repo is None:
        logger.error("Case repository is not initialized")
        raise HTTPException(status_code=500, detail="Case store unavailable")
    return case_repo


def get_simulator(request: Request) -> CaseSimulator:
    """
    Lazy init simulator; one per app so a configured seed gives a reproducible stream.
    """
    if not hasattr(request.app.state, "simulator"):
        request.app.state.simulator = CaseSimulator.seeded(settings.simulation_seed)
        logger.info("CaseSimulator initialized (lazy)")
    return request.app.state.simulator
