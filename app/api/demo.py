from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from app.dependencies import get_case_repo, get_simulator
from app.repositories.base import EmergencyCaseRepository
from app.schemas.emergency_case import EmergencyCase
from app.services.case_simulator import CaseSimulator
from app.services.demo_loader import seed_demo_data


router = APIRouter(tags=["demo"])


@router.post("/load")
def load_demo(case_repo: EmergencyCaseRepository = Depends(get_case_repo)):
    # demo rows carry fixed ids 1..5; mixing them into live data would drop some
    if case_repo.count() > 0:
        raise HTTPException(status_code=409, detail="Demo data can only be loaded into an empty store")

    loaded = seed_demo_data(case_repo)
    return {"status": "loaded", "summary": {"cases": loaded}}


@router.post("/simulate", response_model=List[EmergencyCase], status_code=201)
def simulate_cases(
    request: Request,
    count: int = Query(1, ge=1, le=50),
    seed: Optional[int] = None,
    case_repo: EmergencyCaseRepository = Depends(get_case_repo),
):
    # explicit seed -> one-off deterministic batch; otherwise the app-wide stream
    simulator = CaseSimulator.seeded(seed) if seed is not None else get_simulator(request)
    return simulator.simulate(case_repo, count)
