from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AssignmentOutcome


@dataclass(frozen=True)
class Assignment:
    """Links one employee to one shift; the pair is unique."""

    employee_id: str
    shift_id: str


OUTCOME_MESSAGES = {
    AssignmentOutcome.OK: "Ok",
    AssignmentOutcome.EMPLOYEE_NOT_FOUND: "Employee does not exist",
    AssignmentOutcome.SHIFT_NOT_FOUND: "Shift does not exist",
    AssignmentOutcome.ALREADY_ASSIGNED: "Employee already assigned to shift",
    AssignmentOutcome.INVALID_CONFIG: "Invalid config: maxDailyHours must be a positive number",
    AssignmentOutcome.INVALID_SHIFT_TIME: "Invalid shift time format",
    AssignmentOutcome.DAILY_LIMIT_EXCEEDED: "Cannot assign shift: maxDailyHours limit would be exceeded.",
}


@dataclass(frozen=True)
class AssignmentResult:
    outcome: AssignmentOutcome
    message: str

    @classmethod
    def of(cls, outcome: AssignmentOutcome) -> "AssignmentResult":
        return cls(outcome=outcome, message=OUTCOME_MESSAGES[outcome])

    @property
    def ok(self) -> bool:
        return self.outcome == AssignmentOutcome.OK
