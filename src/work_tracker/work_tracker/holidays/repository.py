from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        """Holidays with holiday_date in [start, end]. Raises DataUnavailable."""

        raise NotImplementedError
