from __future__ import annotations

from datetime import date
from typing import Sequence

import mysql.connector

from ..core.exceptions import DataUnavailable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT holiday_date, name, on_shift_multiplier, off_shift_multiplier
                    FROM holidays
                    WHERE holiday_date BETWEEN %s AND %s
                    ORDER BY holiday_date ASC
                    """,
                    (start, end),
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            raise DataUnavailable(f"Could not load holidays {start}..{end}: {e}") from e

        return [
            Holiday(
                holiday_date=r["holiday_date"],
                name=r["name"],
                on_shift_multiplier=to_decimal(r["on_shift_multiplier"]),
                off_shift_multiplier=to_decimal(r["off_shift_multiplier"]),
            )
            for r in rows
        ]
