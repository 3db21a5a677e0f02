from __future__ import annotations

import logging

from ..employees.repository import EmployeeRepository
from ..settings.repository import SettingsRepository
from ..shifts.repository import ShiftRepository
from .model import AssignmentResult
from .repository import AssignmentRepository
from .rules import evaluate_assignment

logger = logging.getLogger(__name__)


class AssignmentService:
    """Use case: link an employee to a shift after validation."""

    def __init__(
        self,
        assignments: AssignmentRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        settings: SettingsRepository,
    ):
        self._assignments = assignments
        self._employees = employees
        self._shifts = shifts
        self._settings = settings

    def assign_shift(self, employee_id: str, shift_id: str) -> AssignmentResult:
        employee_id = str(employee_id).strip()
        shift_id = str(shift_id).strip()

        employee = self._employees.get_by_id(employee_id)
        shift = self._shifts.get_by_id(shift_id) if employee else None

        # Storage beyond the two lookups is only read once both exist.
        existing, assigned_shifts, max_daily_hours = None, (), None
        if employee and shift:
            existing = self._assignments.find(employee_id=employee_id, shift_id=shift_id)
            assigned_shifts = self._assignments.list_shifts_for_employee(employee_id)
            max_daily_hours = self._settings.get().max_daily_hours

        result = evaluate_assignment(
            employee=employee,
            shift=shift,
            existing=existing,
            assigned_shifts=assigned_shifts,
            max_daily_hours=max_daily_hours,
        )

        if not result.ok:
            logger.info("Rejected %s -> %s: %s", employee_id, shift_id, result.outcome.value)
            return result

        self._assignments.add(employee_id=employee_id, shift_id=shift_id)
        logger.info("Assigned %s -> %s", employee_id, shift_id)
        return result
