from typing import Dict, List

from app.schemas.emergency_case import SEVERITY_ORDER, EmergencyCase


class CaseSummaryService:
    """
    Read models for the responder dashboard, derived from a list of cases.
    No state stored. Fully deterministic.
    """

    @staticmethod
    def stats(cases: List[EmergencyCase]) -> Dict[str, int]:
        by_status: Dict[str, int] = {}
        critical = 0

        for c in cases:
            by_status[c.status] = by_status.get(c.status, 0) + 1
            if c.severity == "critical":
                critical += 1

        return {
            "total": len(cases),
            "pending": by_status.get("pending", 0),
            "dispatched": by_status.get("dispatched", 0),
            "resolved": by_status.get("resolved", 0),
            "critical": critical,
            # unknown statuses (permissive mode) still count as open work
            "active": len(cases) - by_status.get("resolved", 0),
        }

    @staticmethod
    def active_queue(cases: List[EmergencyCase]) -> List[EmergencyCase]:
        """
        Everything not resolved, most severe first; oldest first within a severity.
        """
        active = [c for c in cases if c.status != "resolved"]
        return sorted(
            active,
            key=lambda c: (SEVERITY_ORDER.get(c.severity, len(SEVERITY_ORDER)), c.created_at, c.id),
        )
