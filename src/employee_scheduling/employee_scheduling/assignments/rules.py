"""Assignment validation as a pure function.

No storage access happens here: the caller loads the employee, the shift, any
existing assignment of the pair, the employee's already-assigned shifts and the
configured cap, and gets back a tagged result.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from ..common.time_utils import shift_minutes
from ..common.validators import positive_number
from ..core.enums import AssignmentOutcome
from ..employees.model import Employee
from ..shifts.model import Shift
from .model import Assignment, AssignmentResult


def _valid_duration(shift: Shift) -> Optional[int]:
    minutes = shift_minutes(shift.start_time, shift.end_time)
    if minutes is None or minutes <= 0:
        return None
    return minutes


def scheduled_minutes_on(date: str, shifts: Iterable[Shift]) -> Optional[int]:
    """Total minutes of ``shifts`` falling on ``date``; ``None`` if any is malformed."""
    total = 0
    for shift in shifts:
        if shift.date != date:
            continue
        minutes = _valid_duration(shift)
        if minutes is None:
            return None
        total += minutes
    return total


def evaluate_assignment(
    *,
    employee: Optional[Employee],
    shift: Optional[Shift],
    existing: Optional[Assignment],
    assigned_shifts: Iterable[Shift],
    max_daily_hours: object,
) -> AssignmentResult:
    """Decide whether ``employee`` may take ``shift``.

    Checks run in order and stop at the first failure: employee exists, shift
    exists, pair not yet assigned, cap is a positive number, new shift has a
    valid positive duration, and the same-date total stays within
    ``floor(max_daily_hours * 60)`` minutes.
    """

    if employee is None:
        return AssignmentResult.of(AssignmentOutcome.EMPLOYEE_NOT_FOUND)
    if shift is None:
        return AssignmentResult.of(AssignmentOutcome.SHIFT_NOT_FOUND)
    if existing is not None:
        return AssignmentResult.of(AssignmentOutcome.ALREADY_ASSIGNED)

    cap_hours = positive_number(max_daily_hours)
    if cap_hours is None:
        return AssignmentResult.of(AssignmentOutcome.INVALID_CONFIG)

    new_minutes = _valid_duration(shift)
    if new_minutes is None:
        return AssignmentResult.of(AssignmentOutcome.INVALID_SHIFT_TIME)

    already = scheduled_minutes_on(shift.date, assigned_shifts)
    if already is None:
        return AssignmentResult.of(AssignmentOutcome.INVALID_SHIFT_TIME)

    if already + new_minutes > math.floor(cap_hours * 60):
        return AssignmentResult.of(AssignmentOutcome.DAILY_LIMIT_EXCEEDED)

    return AssignmentResult.of(AssignmentOutcome.OK)
