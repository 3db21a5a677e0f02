from __future__ import annotations

from typing import Optional

import pytest

from src.employee_scheduling.employee_scheduling.core.exceptions import NotFoundError, ValidationError
from src.employee_scheduling.employee_scheduling.employees.model import Employee
from src.employee_scheduling.employee_scheduling.employees.service import EmployeeService


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self.by_id = {e.employee_id: e for e in employees}

    def list_all(self):
        return list(self.by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self.by_id.get(employee_id)

    def create(self, *, name: str, phone: str) -> str:
        employee_id = f"E{len(self.by_id) + 1:03d}"
        self.by_id[employee_id] = Employee(employee_id=employee_id, name=name, phone=phone)
        return employee_id

    def update(self, *, employee_id: str, name: str, phone: str) -> bool:
        if employee_id not in self.by_id:
            return False
        self.by_id[employee_id] = Employee(employee_id=employee_id, name=name, phone=phone)
        return True


@pytest.fixture
def repo():
    return InMemoryEmployees(Employee(employee_id="E001", name="Ava", phone="5551-0101"))


def test_update_trims_and_saves(repo):
    svc = EmployeeService(repo)

    svc.update_employee(employee_id="E001", name="  Ava T.  ", phone=" 1234-5678 ")

    assert repo.by_id["E001"] == Employee(employee_id="E001", name="Ava T.", phone="1234-5678")


def test_update_rejects_blank_name(repo):
    svc = EmployeeService(repo)

    with pytest.raises(ValidationError) as excinfo:
        svc.update_employee(employee_id="E001", name="   ", phone="1234-5678")

    assert str(excinfo.value) == "Validation failed: Name must be non-empty"
    assert repo.by_id["E001"].name == "Ava"


@pytest.mark.parametrize("phone", ["12345678", "123-45678", "1234-567", "abcd-efgh", "", None])
def test_update_rejects_bad_phone(repo, phone):
    svc = EmployeeService(repo)

    with pytest.raises(ValidationError) as excinfo:
        svc.update_employee(employee_id="E001", name="Ava", phone=phone)

    assert str(excinfo.value) == "Validation failed: Phone must be 4 digits, a dash, then 4 digits"


def test_update_unknown_employee_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        EmployeeService(repo).update_employee(employee_id="E999", name="Zed", phone="1234-5678")


def test_add_employee_returns_new_id(repo):
    svc = EmployeeService(repo)

    employee_id = svc.add_employee(name="Ben", phone="5551-0102")

    assert employee_id == "E002"
    assert svc.get_employee("E002").name == "Ben"
    assert [e.employee_id for e in svc.list_employees()] == ["E001", "E002"]


def test_add_employee_validates_before_writing(repo):
    with pytest.raises(ValidationError):
        EmployeeService(repo).add_employee(name="", phone="5551-0102")
    assert len(repo.by_id) == 1
