from __future__ import annotations

from datetime import date
from typing import Iterable, Iterator, Optional

from .model import Holiday


class HolidayIndex:
    """Holidays by date for one year (at most one holiday per date)."""

    def __init__(self, year: int, holidays: Iterable[Holiday] = (), *, available: bool = True):
        self.year = year
        self.available = available
        self._by_date: dict[date, Holiday] = {}
        for holiday in holidays:
            if holiday.holiday_date.year == year:
                self._by_date[holiday.holiday_date] = holiday

    def get(self, day: date) -> Optional[Holiday]:
        return self._by_date.get(day)

    def __contains__(self, day: object) -> bool:
        return day in self._by_date

    def __iter__(self) -> Iterator[Holiday]:
        return iter(sorted(self._by_date.values(), key=lambda h: h.holiday_date))

    def __len__(self) -> int:
        return len(self._by_date)
