from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from app.schemas.emergency_case import EmergencyCase, EmergencyCaseCreate


class EmergencyCaseRepository(ABC):
    """
    Abstract Base Class for Emergency Case data access.

    Implementations own their records: every method returns copies,
    never live references into the underlying collection.
    Not-found is signalled with None, never with an exception.
    """

    # -------------------------
    # Core Case Management
    # -------------------------
    @abstractmethod
    def list_cases(self) -> List[EmergencyCase]:
        """List all cases (insertion order)."""
        pass

    @abstractmethod
    def get_case(self, case_id: int) -> Optional[EmergencyCase]:
        """Retrieve a single case by ID, or None."""
        pass

    @abstractmethod
    def create_case(self, data: EmergencyCaseCreate) -> EmergencyCase:
        """Assign id + created_at, store and return the new case."""
        pass

    @abstractmethod
    def update_case_status(self, case_id: int, status: str) -> Optional[EmergencyCase]:
        """Replace only the status of a case. None when the id is unknown."""
        pass

    # -------------------------
    # Bulk / housekeeping
    # -------------------------
    @abstractmethod
    def load_cases(self, cases: Iterable[EmergencyCase]) -> int:
        """Import fully-formed cases (seed data). Returns how many were loaded."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
