import logging
import random
from decimal import Decimal
from typing import List, Optional

from app.repositories.base import EmergencyCaseRepository
from app.schemas.emergency_case import EmergencyCase, EmergencyCaseCreate

logger = logging.getLogger(__name__)

# -------------------------
# Simulation vocabulary
# -------------------------
INCIDENTS = {
    "Heart Attack": "Adult clutching chest, sweating and short of breath",
    "Allergic Reaction": "Swelling of the face and lips after eating, wheezing",
    "Fall Injury": "Person fell from a ladder, unable to stand, possible broken leg",
    "Burn Injury": "Scald from boiling water across forearm, skin blistering",
}
SEVERITIES = ["low", "medium", "high", "critical"]
REPORTERS = ["Layla Hassan", "James Carter", "Priya Nair", "Yusuf Karim", "Mei Lin"]

# city centre the simulated incidents cluster around
CENTER_LAT = Decimal("51.5074")
CENTER_LON = Decimal("-0.1278")
SPREAD = Decimal("0.01")
COORD_PLACES = Decimal("0.000001")


class CaseSimulator:
    """
    Produces plausible incoming emergency reports for demos.

    All randomness comes from the injected random.Random,
    so the same seed always yields the same reports.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "CaseSimulator":
        return cls(random.Random(seed))

    def _coordinate(self, center: Decimal) -> str:
        offset = (Decimal(str(self.rng.random())) - Decimal("0.5")) * SPREAD
        return str((center + offset).quantize(COORD_PLACES))

    def _phone(self) -> str:
        return "+44-7{:03d}-{:06d}".format(self.rng.randint(0, 999), self.rng.randint(0, 999999))

    def next_report(self) -> EmergencyCaseCreate:
        incident = self.rng.choice(sorted(INCIDENTS))
        return EmergencyCaseCreate(
            type=incident,
            description=INCIDENTS[incident],
            location=f"{self.rng.randint(1, 999)} Random Street, City Center",
            latitude=self._coordinate(CENTER_LAT),
            longitude=self._coordinate(CENTER_LON),
            reporter_name=self.rng.choice(REPORTERS),
            reporter_phone=self._phone(),
            severity=self.rng.choice(SEVERITIES),
        )

    def reports(self, count: int) -> List[EmergencyCaseCreate]:
        return [self.next_report() for _ in range(count)]

    def simulate(self, case_repo: EmergencyCaseRepository, count: int = 1) -> List[EmergencyCase]:
        """Create `count` simulated cases through the repository."""
        created = [case_repo.create_case(report) for report in self.reports(count)]
        logger.info("Simulated emergency cases", extra={"props": {"count": len(created)}})
        return created
