from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..assignments.repository import AssignmentRepository
from ..common.time_utils import is_morning
from ..shifts.model import Shift


@dataclass(frozen=True)
class ScheduleRowUI:
    shift_id: str
    date: str
    start_time: str
    end_time: str
    is_morning: bool


class ScheduleService:
    def __init__(self, assignments: AssignmentRepository):
        self._assignments = assignments

    def get_schedule(self, employee_id: str) -> Sequence[Shift]:
        return self._assignments.list_shifts_for_employee(str(employee_id).strip())

    def get_schedule_sorted(self, employee_id: str) -> Sequence[ScheduleRowUI]:
        """Assigned shifts ordered by date, then start time."""
        shifts = sorted(self.get_schedule(employee_id), key=lambda s: (s.date, s.start_time))
        return [
            ScheduleRowUI(
                shift_id=s.shift_id,
                date=s.date,
                start_time=s.start_time,
                end_time=s.end_time,
                is_morning=is_morning(s.start_time),
            )
            for s in shifts
        ]
