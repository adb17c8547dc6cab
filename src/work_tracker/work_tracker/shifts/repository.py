from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import Period
from .model import WorkShiftRecord


class WorkShiftRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[WorkShiftRecord]:
        """Records with work_date in [start, end], working or not; order is not significant.

        Raises DataUnavailable when the store cannot be read.
        """

        raise NotImplementedError

    def create(self, *, work_date: date, period: Period, is_working: bool = True) -> WorkShiftRecord:
        """Insert a record and return it as stored. Raises WriteRejected."""

        raise NotImplementedError

    def update_status(self, *, record_id: int, is_working: bool) -> WorkShiftRecord:
        """Set is_working on an existing record and return it as stored. Raises WriteRejected."""

        raise NotImplementedError
