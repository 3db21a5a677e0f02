from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_clock, normalize_mysql_date
from .model import Shift
from .repository import ShiftRepository


def row_to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=r["shift_id"],
        date=normalize_mysql_date(r["shift_date"]),
        start_time=normalize_clock(r["start_time"]),
        end_time=normalize_clock(r["end_time"]),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_date, start_time, end_time
                FROM shifts
                ORDER BY shift_date, start_time, shift_id
                """
            )
            return [row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_date, start_time, end_time
                FROM shifts
                WHERE shift_id=%s
                """,
                (shift_id,),
            )
            r = fetchone(cur)
            return row_to_shift(r) if r else None
