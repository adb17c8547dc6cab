from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from src.work_tracker.work_tracker.core.enums import Period
from src.work_tracker.work_tracker.core.exceptions import DataUnavailable, WriteRejected
from src.work_tracker.work_tracker.holidays.model import Holiday
from src.work_tracker.work_tracker.shifts.model import WorkShiftRecord


class InMemoryShifts:
    def __init__(self, records=(), *, fail_reads: bool = False, fail_writes: bool = False):
        self._records: dict[int, WorkShiftRecord] = {r.record_id: r for r in records}
        self._next_id = max(self._records, default=0) + 1
        self._clock = datetime(2026, 1, 1, 9, 0, 0)
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.list_calls: list[tuple[date, date]] = []

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def list_range(self, *, start: date, end: date):
        self.list_calls.append((start, end))
        if self.fail_reads:
            raise DataUnavailable("store unreachable")
        return [r for r in self._records.values() if start <= r.work_date <= end]

    def create(self, *, work_date: date, period: Period, is_working: bool = True) -> WorkShiftRecord:
        if self.fail_writes:
            raise WriteRejected("insert refused")
        now = self._tick()
        record = WorkShiftRecord(
            record_id=self._next_id,
            work_date=work_date,
            period=period,
            is_working=is_working,
            created_at=now,
            updated_at=now,
        )
        self._records[record.record_id] = record
        self._next_id += 1
        return record

    def update_status(self, *, record_id: int, is_working: bool) -> WorkShiftRecord:
        if self.fail_writes:
            raise WriteRejected("update refused")
        current = self._records.get(record_id)
        if current is None:
            raise WriteRejected(f"Work record {record_id} does not exist")
        record = WorkShiftRecord(
            record_id=current.record_id,
            work_date=current.work_date,
            period=current.period,
            is_working=is_working,
            created_at=current.created_at,
            updated_at=self._tick(),
        )
        self._records[record_id] = record
        return record


class InMemoryHolidays:
    def __init__(self, holidays=(), *, fail_reads: bool = False):
        self._holidays = list(holidays)
        self.fail_reads = fail_reads
        self.last_args = None

    def list_range(self, *, start: date, end: date):
        self.last_args = {"start": start, "end": end}
        if self.fail_reads:
            raise DataUnavailable("store unreachable")
        return [h for h in self._holidays if start <= h.holiday_date <= end]


def make_record(record_id: int, work_date: date, period: Period, is_working: bool = True, *, updated_at=None):
    stamp = updated_at or datetime(2026, 1, 1, 8, 0, 0)
    return WorkShiftRecord(
        record_id=record_id,
        work_date=work_date,
        period=period,
        is_working=is_working,
        created_at=stamp,
        updated_at=stamp,
    )


@pytest.fixture
def january_records():
    """Jan 5 AM+PM, Jan 6 AM only, Jan 7 AM+PM (a holiday), Jan 8 AM switched off."""
    return [
        make_record(1, date(2026, 1, 5), Period.MORNING),
        make_record(2, date(2026, 1, 5), Period.AFTERNOON),
        make_record(3, date(2026, 1, 6), Period.MORNING),
        make_record(4, date(2026, 1, 7), Period.MORNING),
        make_record(5, date(2026, 1, 7), Period.AFTERNOON),
        make_record(6, date(2026, 1, 8), Period.MORNING, is_working=False),
    ]


@pytest.fixture
def january_holidays():
    return [
        Holiday(
            holiday_date=date(2026, 1, 7),
            name="Company Day",
            on_shift_multiplier=Decimal("2.0"),
            off_shift_multiplier=Decimal("1.0"),
        ),
        Holiday(
            holiday_date=date(2026, 1, 1),
            name="New Year's Day",
            on_shift_multiplier=Decimal("3.0"),
            off_shift_multiplier=Decimal("1.0"),
        ),
    ]


@pytest.fixture
def daily_rate():
    return Decimal("8500") / Decimal("26")


@pytest.fixture
def record():
    return make_record


@pytest.fixture
def fake_shifts():
    return InMemoryShifts


@pytest.fixture
def fake_holidays():
    return InMemoryHolidays
