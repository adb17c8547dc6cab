from __future__ import annotations

from datetime import date
from typing import Sequence

import mysql.connector

from ..core.enums import Period
from ..core.exceptions import DataUnavailable, WriteRejected
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime
from .model import WorkShiftRecord
from .repository import WorkShiftRepository

_COLUMNS = "id, work_date, period, is_working, created_at, updated_at"


def _to_record(r: dict) -> WorkShiftRecord:
    return WorkShiftRecord(
        record_id=int(r["id"]),
        work_date=r["work_date"],
        period=Period(r["period"]),
        is_working=bool(r["is_working"]),
        created_at=normalize_mysql_datetime(r.get("created_at")),
        updated_at=normalize_mysql_datetime(r.get("updated_at")),
    )


class MySQLWorkShiftRepository(WorkShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[WorkShiftRecord]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    SELECT {_COLUMNS}
                    FROM work_records
                    WHERE work_date BETWEEN %s AND %s
                    ORDER BY work_date ASC, period ASC, id ASC
                    """,
                    (start, end),
                )
                return [_to_record(r) for r in fetchall(cur)]
        except mysql.connector.Error as e:
            raise DataUnavailable(f"Could not load work records {start}..{end}: {e}") from e

    def create(self, *, work_date: date, period: Period, is_working: bool = True) -> WorkShiftRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO work_records(work_date, period, is_working) VALUES(%s,%s,%s)",
                    (work_date, period.value, int(bool(is_working))),
                )
                record_id = int(cur.lastrowid)
                cur.execute(f"SELECT {_COLUMNS} FROM work_records WHERE id=%s", (record_id,))
                r = fetchone(cur)
        except mysql.connector.Error as e:
            raise WriteRejected(f"Could not create {period.value} record for {work_date}: {e}") from e

        if not r:
            raise WriteRejected(f"Record for {work_date} {period.value} vanished after insert")
        return _to_record(r)

    def update_status(self, *, record_id: int, is_working: bool) -> WorkShiftRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "UPDATE work_records SET is_working=%s, updated_at=CURRENT_TIMESTAMP WHERE id=%s",
                    (int(bool(is_working)), int(record_id)),
                )
                cur.execute(f"SELECT {_COLUMNS} FROM work_records WHERE id=%s", (int(record_id),))
                r = fetchone(cur)
        except mysql.connector.Error as e:
            raise WriteRejected(f"Could not update work record {record_id}: {e}") from e

        if not r:
            raise WriteRejected(f"Work record {record_id} does not exist")
        return _to_record(r)
