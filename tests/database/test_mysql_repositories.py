from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import mysql.connector
import pytest

from src.work_tracker.work_tracker.core.enums import Period
from src.work_tracker.work_tracker.core.exceptions import DataUnavailable, WriteRejected
from src.work_tracker.work_tracker.holidays.mysql_holiday_repository import MySQLHolidayRepository
from src.work_tracker.work_tracker.shifts.mysql_shift_repository import MySQLWorkShiftRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = list(rows)
        self.executed: list[tuple[str, tuple]] = []
        self.lastrowid = 0

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))
        if sql.lstrip().upper().startswith("INSERT"):
            self.lastrowid = 42

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, rows=(), *, error=None):
        self.cursor = FakeCursor(rows)
        self.connection = FakeConnection(self.cursor)
        self._error = error

    def connect(self):
        if self._error:
            raise self._error
        return self.connection


def _row(record_id=1, *, is_working=1, period="AM"):
    return {
        "id": record_id,
        "work_date": date(2026, 1, 5),
        "period": period,
        "is_working": is_working,
        "created_at": datetime(2026, 1, 5, 8, 0),
        "updated_at": "2026-01-05 09:30:00",
    }


def test_list_range_maps_rows_including_non_working():
    factory = FakeConnFactory([_row(1), _row(2, is_working=0, period="PM")])
    repo = MySQLWorkShiftRepository(factory)

    records = repo.list_range(start=date(2026, 1, 1), end=date(2026, 1, 31))

    sql, params = factory.cursor.executed[0]
    assert "WHERE work_date BETWEEN %s AND %s\n" in sql
    assert "is_working=" not in sql
    assert params == (date(2026, 1, 1), date(2026, 1, 31))
    assert records[0].period == Period.MORNING
    assert records[1].is_working is False
    assert records[0].updated_at == datetime(2026, 1, 5, 9, 30)
    assert factory.connection.committed


def test_unreachable_store_raises_data_unavailable():
    repo = MySQLWorkShiftRepository(FakeConnFactory(error=mysql.connector.Error("Can't connect to MySQL server")))

    with pytest.raises(DataUnavailable):
        repo.list_range(start=date(2026, 1, 1), end=date(2026, 1, 31))


def test_create_returns_stored_row():
    factory = FakeConnFactory([_row(42)])
    record = MySQLWorkShiftRepository(factory).create(work_date=date(2026, 1, 5), period=Period.MORNING)

    assert record.record_id == 42
    assert factory.cursor.executed[0][1] == (date(2026, 1, 5), "AM", 1)
    assert factory.cursor.executed[1][1] == (42,)


def test_failed_write_raises_write_rejected():
    repo = MySQLWorkShiftRepository(FakeConnFactory(error=mysql.connector.Error("Lost connection")))

    with pytest.raises(WriteRejected):
        repo.update_status(record_id=1, is_working=False)
    with pytest.raises(WriteRejected):
        repo.create(work_date=date(2026, 1, 5), period=Period.AFTERNOON)


def test_update_of_missing_record_is_rejected():
    with pytest.raises(WriteRejected):
        MySQLWorkShiftRepository(FakeConnFactory([])).update_status(record_id=99, is_working=True)


def test_holiday_rows_become_decimal_multipliers():
    factory = FakeConnFactory(
        [
            {
                "holiday_date": date(2026, 10, 1),
                "name": "National Day",
                "on_shift_multiplier": Decimal("3.00"),
                "off_shift_multiplier": 1.0,
            }
        ]
    )

    (holiday,) = MySQLHolidayRepository(factory).list_range(start=date(2026, 1, 1), end=date(2026, 12, 31))

    assert holiday.on_shift_multiplier == Decimal("3.00")
    assert holiday.off_shift_multiplier == Decimal("1.0")


def test_holiday_read_failure_raises_data_unavailable():
    repo = MySQLHolidayRepository(FakeConnFactory(error=mysql.connector.Error("timeout")))

    with pytest.raises(DataUnavailable):
        repo.list_range(start=date(2026, 1, 1), end=date(2026, 12, 31))
