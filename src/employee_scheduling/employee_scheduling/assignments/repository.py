from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..shifts.model import Shift
from .model import Assignment


class AssignmentRepository(Protocol):
    def find(self, *, employee_id: str, shift_id: str) -> Optional[Assignment]:
        raise NotImplementedError

    def add(self, *, employee_id: str, shift_id: str) -> None:
        """Persist the pair as-is; business checks belong to the service."""

        raise NotImplementedError

    def list_shifts_for_employee(self, employee_id: str) -> Sequence[Shift]:
        """Shifts assigned to the employee (assignments joined with shifts)."""

        raise NotImplementedError
