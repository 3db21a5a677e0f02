from __future__ import annotations

from typing import Optional, Sequence

from ..common.identifiers import next_identifier
from ..core.constants import EMPLOYEE_ID_PREFIX, EMPLOYEES_FILE
from ..database.json_store import JsonFileStore
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(record: dict) -> Employee:
    return Employee(
        employee_id=str(record["employeeId"]),
        name=str(record.get("name", "")),
        phone=str(record.get("phone", "")),
    )


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: JsonFileStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return [_to_employee(r) for r in self._store.read_records(EMPLOYEES_FILE)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for r in self._store.read_records(EMPLOYEES_FILE):
            if r.get("employeeId") == employee_id:
                return _to_employee(r)
        return None

    def create(self, *, name: str, phone: str) -> str:
        records = self._store.read_records(EMPLOYEES_FILE)
        employee_id = next_identifier((r.get("employeeId", "") for r in records), prefix=EMPLOYEE_ID_PREFIX)
        records.append({"employeeId": employee_id, "name": name, "phone": phone})
        self._store.write_records(EMPLOYEES_FILE, records)
        return employee_id

    def update(self, *, employee_id: str, name: str, phone: str) -> bool:
        records = self._store.read_records(EMPLOYEES_FILE)
        for r in records:
            if r.get("employeeId") == employee_id:
                r["name"] = name
                r["phone"] = phone
                self._store.write_records(EMPLOYEES_FILE, records)
                return True
        return False
