import logging
from datetime import datetime, timezone
from typing import List

from app.repositories.base import EmergencyCaseRepository
from app.schemas.emergency_case import EmergencyCase

logger = logging.getLogger(__name__)


def _at(iso: str) -> datetime:
    return datetime.fromisoformat(iso).replace(tzinfo=timezone.utc)


DEMO_CASES = [
    # =========================
    # 1: critical, waiting
    # =========================
    {
        "id": 1,
        "type": "Cardiac Arrest",
        "description": "Elderly man collapsed while jogging, not responding to verbal commands",
        "location": "Central Park, Near Fountain",
        "latitude": "24.4539",
        "longitude": "54.3773",
        "reporter_name": "Ahmed Al Rashid",
        "reporter_phone": "+971-50-123-4567",
        "severity": "critical",
        "status": "pending",
        "created_at": _at("2024-01-19T13:45:00"),
    },
    {
        "id": 2,
        "type": "Traffic Accident",
        "description": "Two car collision, multiple passengers injured, need immediate medical attention",
        "location": "Sheikh Zayed Road, Exit 45",
        "latitude": "24.4395",
        "longitude": "54.4068",
        "reporter_name": "Sara Mohamed",
        "reporter_phone": "+971-52-987-6543",
        "severity": "high",
        "status": "pending",
        "created_at": _at("2024-01-19T13:38:00"),
    },
    {
        "id": 3,
        "type": "Severe Bleeding",
        "description": "Construction worker with deep cut on arm from machinery accident",
        "location": "Dubai Marina Construction Site",
        "latitude": "24.4332",
        "longitude": "54.4097",
        "reporter_name": "Omar Hassan",
        "reporter_phone": "+971-55-456-7890",
        "severity": "high",
        "status": "pending",
        "created_at": _at("2024-01-19T13:30:00"),
    },
    # =========================
    # 4: responder already on the way
    # =========================
    {
        "id": 4,
        "type": "Allergic Reaction",
        "description": "Child having severe allergic reaction to food, difficulty breathing",
        "location": "Mall of the Emirates, Food Court",
        "latitude": "24.4526",
        "longitude": "54.3857",
        "reporter_name": "Fatima Al Zahra",
        "reporter_phone": "+971-50-234-5678",
        "severity": "critical",
        "status": "dispatched",
        "created_at": _at("2024-01-19T13:15:00"),
    },
    {
        "id": 5,
        "type": "Burns",
        "description": "Kitchen accident with hot oil, second degree burns on hands and arms",
        "location": "Jumeirah Beach Residence, Tower 3",
        "latitude": "24.4270",
        "longitude": "54.4194",
        "reporter_name": "Khalid Al Mansouri",
        "reporter_phone": "+971-56-345-6789",
        "severity": "medium",
        "status": "pending",
        "created_at": _at("2024-01-19T13:00:00"),
    },
]


def demo_cases() -> List[EmergencyCase]:
    return [EmergencyCase(**row) for row in DEMO_CASES]


def seed_demo_data(case_repo: EmergencyCaseRepository) -> int:
    """
    Load the demo cases into the given repository.
    Safe to re-run: ids already present are left alone.
    """
    loaded = case_repo.load_cases(demo_cases())
    logger.info("[DEMO] Seed completed", extra={"props": {"cases": loaded}})
    return loaded
