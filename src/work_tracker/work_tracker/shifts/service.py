from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import Period
from ..core.exceptions import DataUnavailable, WriteRejected
from .ledger import ShiftLedger
from .model import WorkShiftRecord
from .repository import WorkShiftRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    record: WorkShiftRecord
    ledger: Optional[ShiftLedger] = None


class ShiftLedgerService:
    def __init__(self, shifts: WorkShiftRepository):
        self._shifts = shifts

    def load(self, start: date, end: date) -> ShiftLedger:
        """Load the ledger for [start, end]; an unreachable store yields an empty, unavailable ledger."""
        try:
            records = self._shifts.list_range(start=start, end=end)
        except DataUnavailable as e:
            logger.warning("Work records unavailable for %s..%s: %s", start, end, e)
            return ShiftLedger.empty(start, end, available=False)
        return ShiftLedger.from_records(start, end, records)

    def _current(self, work_date: date, period: Period, ledger: Optional[ShiftLedger]) -> Optional[WorkShiftRecord]:
        if ledger is not None and ledger.available and ledger.covers(work_date):
            return ledger.get(work_date, period)

        # No usable snapshot: read the single cell from the store.
        try:
            records = self._shifts.list_range(start=work_date, end=work_date)
        except DataUnavailable as e:
            raise WriteRejected(f"Cannot toggle {work_date} {period.value}: {e}") from e
        return ShiftLedger.from_records(work_date, work_date, records).get(work_date, period)

    def toggle(self, work_date: date, period: Period, *, ledger: Optional[ShiftLedger] = None) -> ToggleResult:
        """Flip the cell's working flag, creating the record on first use.

        Read-modify-write with no version check: last write wins. On
        WriteRejected the given ledger is left untouched.
        """
        try:
            existing = self._current(work_date, period, ledger)
            if existing is not None:
                record = self._shifts.update_status(record_id=existing.record_id, is_working=not existing.is_working)
            else:
                record = self._shifts.create(work_date=work_date, period=period, is_working=True)
        except WriteRejected as e:
            logger.error("Toggle of %s %s rejected: %s", work_date, period.value, e)
            raise

        logger.debug("Toggled %s %s -> is_working=%s", work_date, period.value, record.is_working)
        return ToggleResult(record=record, ledger=ledger.with_record(record) if ledger is not None else None)
