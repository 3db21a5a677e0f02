from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_name, require_phone
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: list, add and edit employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(str(employee_id).strip())

    def add_employee(self, *, name: str, phone: str) -> str:
        name = require_name(name)
        phone = require_phone(phone)

        employee_id = self._employees.create(name=name, phone=phone)
        logger.info("Added employee %s (%s)", employee_id, name)
        return employee_id

    def update_employee(self, *, employee_id: str, name: str, phone: str) -> None:
        name = require_name(name)
        phone = require_phone(phone)

        if not self._employees.update(employee_id=employee_id, name=name, phone=phone):
            raise NotFoundError("Employee not found")
        logger.info("Updated employee %s", employee_id)
