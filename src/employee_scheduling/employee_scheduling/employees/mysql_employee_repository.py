from __future__ import annotations

from typing import Optional, Sequence

from ..common.identifiers import next_identifier
from ..core.constants import EMPLOYEE_ID_PREFIX
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id, name, phone FROM employees ORDER BY employee_id")
            rows = fetchall(cur)
            return [Employee(employee_id=r["employee_id"], name=r["name"], phone=r["phone"]) for r in rows]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, name, phone FROM employees WHERE employee_id=%s",
                (employee_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(employee_id=r["employee_id"], name=r["name"], phone=r["phone"])

    def create(self, *, name: str, phone: str) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_id FROM employees FOR UPDATE")
            employee_id = next_identifier((r["employee_id"] for r in fetchall(cur)), prefix=EMPLOYEE_ID_PREFIX)
            cur.execute(
                "INSERT INTO employees(employee_id, name, phone) VALUES(%s,%s,%s)",
                (employee_id, name, phone),
            )
            return employee_id

    def update(self, *, employee_id: str, name: str, phone: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET name=%s, phone=%s WHERE employee_id=%s",
                (name, phone, employee_id),
            )
            # rowcount is 0 when the values are unchanged; confirm the row exists.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (employee_id,))
            return fetchone(cur) is not None
