from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from ..holidays.index import HolidayIndex
from ..shifts.ledger import ShiftLedger
from ..shifts.model import WorkShiftRecord


@dataclass(frozen=True)
class LoadTicket:
    generation: int
    year: int
    month: int


@dataclass(frozen=True)
class CalendarSnapshot:
    year: int
    month: int
    ledger: Optional[ShiftLedger] = None
    holidays: Optional[HolidayIndex] = None


class CalendarState:
    """Currently selected month and the data last loaded for it.

    Each load is tagged with the generation and (year, month) it was issued
    for. A result whose ticket is no longer the latest selection is dropped,
    so a slow response for an earlier month cannot overwrite newer data.
    """

    def __init__(self, year: int, month: int):
        self._lock = threading.Lock()
        self._generation = 0
        self._snapshot = CalendarSnapshot(year=year, month=month)

    def snapshot(self) -> CalendarSnapshot:
        with self._lock:
            return self._snapshot

    def select(self, year: int, month: int) -> LoadTicket:
        with self._lock:
            self._generation += 1
            if (year, month) != (self._snapshot.year, self._snapshot.month):
                self._snapshot = CalendarSnapshot(year=year, month=month)
            return LoadTicket(generation=self._generation, year=year, month=month)

    def is_current(self, ticket: LoadTicket) -> bool:
        with self._lock:
            return ticket.generation == self._generation

    def accept(self, ticket: LoadTicket, *, ledger: ShiftLedger, holidays: HolidayIndex) -> bool:
        """Store the loaded data unless a newer selection was made meanwhile."""
        with self._lock:
            if ticket.generation != self._generation:
                return False
            self._snapshot = CalendarSnapshot(year=ticket.year, month=ticket.month, ledger=ledger, holidays=holidays)
            return True

    def ledger_for(self, year: int, month: int) -> Optional[ShiftLedger]:
        with self._lock:
            if (self._snapshot.year, self._snapshot.month) != (year, month):
                return None
            return self._snapshot.ledger

    def apply_toggle(self, record: WorkShiftRecord) -> bool:
        """Fold a persisted toggle into the snapshot if it belongs to the loaded month.

        Also retires every outstanding ticket: a load issued before the write
        may have read the old row and must not replace the snapshot.
        """
        with self._lock:
            self._generation += 1
            ledger = self._snapshot.ledger
            if ledger is None or not ledger.covers(record.work_date):
                return False
            self._snapshot = CalendarSnapshot(
                year=self._snapshot.year,
                month=self._snapshot.month,
                ledger=ledger.with_record(record),
                holidays=self._snapshot.holidays,
            )
            return True
