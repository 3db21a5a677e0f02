from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import SHIFTS_FILE
from ..database.json_store import JsonFileStore
from .model import Shift
from .repository import ShiftRepository


def to_shift(record: dict) -> Shift:
    return Shift(
        shift_id=str(record["shiftId"]),
        date=str(record.get("date", "")),
        start_time=str(record.get("startTime", "")),
        end_time=str(record.get("endTime", "")),
    )


class JsonShiftRepository(ShiftRepository):
    def __init__(self, store: JsonFileStore):
        self._store = store

    def list_all(self) -> Sequence[Shift]:
        return [to_shift(r) for r in self._store.read_records(SHIFTS_FILE)]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        for r in self._store.read_records(SHIFTS_FILE):
            if r.get("shiftId") == shift_id:
                return to_shift(r)
        return None
