from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee that can be scheduled on shifts."""

    employee_id: str
    name: str
    phone: str
