from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..shifts.model import Shift
from ..shifts.mysql_shift_repository import row_to_shift
from .model import Assignment
from .repository import AssignmentRepository


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, *, employee_id: str, shift_id: str) -> Optional[Assignment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, shift_id FROM assignments WHERE employee_id=%s AND shift_id=%s",
                (employee_id, shift_id),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Assignment(employee_id=r["employee_id"], shift_id=r["shift_id"])

    def add(self, *, employee_id: str, shift_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO assignments(employee_id, shift_id) VALUES(%s,%s)",
                (employee_id, shift_id),
            )

    def list_shifts_for_employee(self, employee_id: str) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.shift_id, s.shift_date, s.start_time, s.end_time
                FROM assignments a
                JOIN shifts s ON s.shift_id = a.shift_id
                WHERE a.employee_id=%s
                ORDER BY s.shift_id
                """,
                (employee_id,),
            )
            return [row_to_shift(r) for r in fetchall(cur)]
