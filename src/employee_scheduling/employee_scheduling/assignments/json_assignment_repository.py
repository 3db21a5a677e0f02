from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import ASSIGNMENTS_FILE, SHIFTS_FILE
from ..database.json_store import JsonFileStore
from ..shifts.json_shift_repository import to_shift
from ..shifts.model import Shift
from .model import Assignment
from .repository import AssignmentRepository


class JsonAssignmentRepository(AssignmentRepository):
    def __init__(self, store: JsonFileStore):
        self._store = store

    def find(self, *, employee_id: str, shift_id: str) -> Optional[Assignment]:
        for r in self._store.read_records(ASSIGNMENTS_FILE):
            if r.get("employeeId") == employee_id and r.get("shiftId") == shift_id:
                return Assignment(employee_id=employee_id, shift_id=shift_id)
        return None

    def add(self, *, employee_id: str, shift_id: str) -> None:
        records = self._store.read_records(ASSIGNMENTS_FILE)
        records.append({"employeeId": employee_id, "shiftId": shift_id})
        self._store.write_records(ASSIGNMENTS_FILE, records)

    def list_shifts_for_employee(self, employee_id: str) -> Sequence[Shift]:
        shift_ids = {
            r.get("shiftId")
            for r in self._store.read_records(ASSIGNMENTS_FILE)
            if r.get("employeeId") == employee_id
        }
        if not shift_ids:
            return []
        return [to_shift(r) for r in self._store.read_records(SHIFTS_FILE) if r.get("shiftId") in shift_ids]
