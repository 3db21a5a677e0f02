from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Storage interface for employees.

    Services depend on this protocol, never on a concrete backend.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, phone: str) -> str:
        """Store a new employee under the next free id and return that id."""

        raise NotImplementedError

    def update(self, *, employee_id: str, name: str, phone: str) -> bool:
        raise NotImplementedError
