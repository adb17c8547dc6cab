from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Iterator, Mapping, Optional

from ..core.enums import Period
from .model import WorkShiftRecord


def _recency(record: WorkShiftRecord) -> tuple[datetime, datetime, int]:
    return (
        record.updated_at or datetime.min,
        record.created_at or datetime.min,
        record.record_id,
    )


class ShiftLedger:
    """Snapshot of the shift records for one inclusive date window.

    Keyed by (date, period). When the store holds several rows for the same
    cell the most recently updated one wins. A ledger is never mutated in
    place; `with_record` returns a new one.
    """

    def __init__(
        self,
        start: date,
        end: date,
        records: Mapping[tuple[date, Period], WorkShiftRecord] | None = None,
        *,
        available: bool = True,
    ):
        self.start = start
        self.end = end
        self.available = available
        self._records: dict[tuple[date, Period], WorkShiftRecord] = dict(records or {})

    @classmethod
    def from_records(cls, start: date, end: date, records: Iterable[WorkShiftRecord]) -> "ShiftLedger":
        by_key: dict[tuple[date, Period], WorkShiftRecord] = {}
        for record in records:
            if not start <= record.work_date <= end:
                continue
            current = by_key.get(record.key)
            if current is None or _recency(record) > _recency(current):
                by_key[record.key] = record
        return cls(start, end, by_key)

    @classmethod
    def empty(cls, start: date, end: date, *, available: bool = True) -> "ShiftLedger":
        return cls(start, end, available=available)

    def covers(self, work_date: date) -> bool:
        return self.start <= work_date <= self.end

    def get(self, work_date: date, period: Period) -> Optional[WorkShiftRecord]:
        return self._records.get((work_date, period))

    def is_working(self, work_date: date, period: Period) -> bool:
        record = self.get(work_date, period)
        return bool(record and record.is_working)

    def with_record(self, record: WorkShiftRecord) -> "ShiftLedger":
        records = dict(self._records)
        if self.covers(record.work_date):
            records[record.key] = record
        return ShiftLedger(self.start, self.end, records, available=self.available)

    def working_dates(self) -> list[date]:
        """Dates with at least one period marked working, in calendar order."""
        return sorted({d for (d, _), r in self._records.items() if r.is_working})

    def records(self) -> Iterator[WorkShiftRecord]:
        for key in sorted(self._records, key=lambda k: (k[0], k[1].value)):
            yield self._records[key]

    def __len__(self) -> int:
        return len(self._records)
