import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from app.repositories.base import EmergencyCaseRepository
from app.schemas.emergency_case import DEFAULT_STATUS, EmergencyCase, EmergencyCaseCreate
from app.utils.id_generator import IdSequence

logger = logging.getLogger(__name__)


class MemoryEmergencyCaseRepository(EmergencyCaseRepository):
    """
    In-process store for emergency cases. Data lives as long as the instance.

    - _cases: {id -> EmergencyCase}, dict keeps insertion order
    - _ids: store-wide id counter, starts at 1
    - _lock: guards _cases and _ids; id assignment + insert is one critical section
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._cases: Dict[int, EmergencyCase] = {}
        self._ids = IdSequence(start=1)

    def list_cases(self) -> List[EmergencyCase]:
        with self._lock:
            return [c.model_copy() for c in self._cases.values()]

    def get_case(self, case_id: int) -> Optional[EmergencyCase]:
        with self._lock:
            case = self._cases.get(case_id)
            return case.model_copy() if case else None

    def create_case(self, data: EmergencyCaseCreate) -> EmergencyCase:
        fields = data.model_dump(exclude={"status"})
        status = data.status or DEFAULT_STATUS

        with self._lock:
            case = EmergencyCase(
                id=self._ids.next_id(),
                status=status,
                created_at=datetime.now(timezone.utc),
                **fields,
            )
            self._cases[case.id] = case

        logger.info(
            "Emergency case created",
            extra={"props": {"case_id": case.id, "severity": case.severity, "status": case.status}},
        )
        return case.model_copy()

    def update_case_status(self, case_id: int, status: str) -> Optional[EmergencyCase]:
        with self._lock:
            current = self._cases.get(case_id)
            if current is None:
                return None
            updated = current.model_copy(update={"status": status})
            self._cases[case_id] = updated

        logger.info(
            "Emergency case status updated",
            extra={"props": {"case_id": case_id, "from": current.status, "to": status}},
        )
        return updated.model_copy()

    def load_cases(self, cases: Iterable[EmergencyCase]) -> int:
        loaded = 0
        with self._lock:
            for case in cases:
                if case.id in self._cases:
                    # ids are never reused; existing records win
                    continue
                self._cases[case.id] = case.model_copy()
                self._ids.advance_past(case.id)
                loaded += 1

        logger.info("Emergency cases loaded", extra={"props": {"loaded": loaded}})
        return loaded

    def count(self) -> int:
        with self._lock:
            return len(self._cases)
