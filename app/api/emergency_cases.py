# app/api/emergency_cases.py

import logging
import re
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from app.core.config import settings
from app.dependencies import get_case_repo
from app.repositories.base import EmergencyCaseRepository
from app.schemas.emergency_case import (
    CASE_STATUSES,
    CaseStats,
    EmergencyCase,
    EmergencyCaseCreate,
    StatusUpdate,
)
from app.services.case_summary import CaseSummaryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["emergency-cases"])

NOT_FOUND = "Emergency case not found"

# leading ASCII integer, the way JS parseInt reads "12abc" as 12
LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


# =================================================
# Helpers
# =================================================
def parse_case_id(raw: str) -> Optional[int]:
    """
    Path ids are parsed leniently: the leading integer is used ("7abc" -> 7),
    anything without one simply matches no case (404), it is not a validation error.
    """
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def check_status_value(status: str) -> None:
    if settings.strict_status and status not in CASE_STATUSES:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid status '{status}', expected one of: {', '.join(CASE_STATUSES)}",
        )


def _failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(status_code=500, detail=message)


# =================================================
# 1. GET List
# =================================================
@router.get("", response_model=List[EmergencyCase])
def list_emergency_cases(case_repo: EmergencyCaseRepository = Depends(get_case_repo)):
    try:
        return case_repo.list_cases()
    except Exception:
        raise _failure("Failed to fetch emergency cases")


# =================================================
# 2. Dashboard read models
# =================================================
@router.get("/stats", response_model=CaseStats)
def get_emergency_case_stats(case_repo: EmergencyCaseRepository = Depends(get_case_repo)):
    try:
        return CaseSummaryService.stats(case_repo.list_cases())
    except Exception:
        raise _failure("Failed to compute emergency case stats")


@router.get("/active", response_model=List[EmergencyCase])
def list_active_emergency_cases(case_repo: EmergencyCaseRepository = Depends(get_case_repo)):
    try:
        return CaseSummaryService.active_queue(case_repo.list_cases())
    except Exception:
        raise _failure("Failed to fetch active emergency cases")


# =================================================
# 3. GET Detail
# =================================================
@router.get("/{case_id}", response_model=EmergencyCase)
def get_emergency_case(case_id: str, case_repo: EmergencyCaseRepository = Depends(get_case_repo)):
    parsed = parse_case_id(case_id)

    try:
        case = case_repo.get_case(parsed) if parsed is not None else None
    except Exception:
        raise _failure("Failed to fetch emergency case")

    if case is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return case


# =================================================
# 4. Create
# =================================================
@router.post("", response_model=EmergencyCase, status_code=201)
def create_emergency_case(
    data: EmergencyCaseCreate,
    case_repo: EmergencyCaseRepository = Depends(get_case_repo),
):
    try:
        return case_repo.create_case(data)
    except Exception:
        raise _failure("Failed to create emergency case")


# =================================================
# 5. Update status
# =================================================
@router.patch("/{case_id}/status", response_model=EmergencyCase)
def update_emergency_case_status(
    case_id: str,
    payload: Optional[StatusUpdate] = Body(None),
    case_repo: EmergencyCaseRepository = Depends(get_case_repo),
):
    status = payload.status if payload else None
    if not status:
        raise HTTPException(status_code=400, detail="Status is required")
    check_status_value(status)

    parsed = parse_case_id(case_id)

    try:
        updated = case_repo.update_case_status(parsed, status) if parsed is not None else None
    except Exception:
        raise _failure("Failed to update emergency case status")

    if updated is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return updated
