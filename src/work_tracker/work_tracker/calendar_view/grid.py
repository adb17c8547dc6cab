from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Optional

from ..common.datetime_utils import month_window, shift_month
from ..core.enums import Period
from ..holidays.index import HolidayIndex
from ..shifts.ledger import ShiftLedger

MONTH_NAMES = [calendar.month_name[i] for i in range(1, 13)]
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _navigable(target: tuple[int, int]) -> Optional[tuple[int, int]]:
    # date() only spans years MINYEAR..MAXYEAR.
    return target if MINYEAR <= target[0] <= MAXYEAR else None


@dataclass(frozen=True)
class DayCell:
    day: date
    am: bool
    pm: bool
    holiday_name: Optional[str] = None

    @property
    def iso(self) -> str:
        return self.day.isoformat()

    @property
    def is_holiday(self) -> bool:
        return self.holiday_name is not None


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    leading_blanks: int
    cells: tuple[DayCell, ...]

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    @property
    def previous(self) -> Optional[tuple[int, int]]:
        return _navigable(shift_month(self.year, self.month, -1))

    @property
    def next(self) -> Optional[tuple[int, int]]:
        return _navigable(shift_month(self.year, self.month, 1))

    def weeks(self) -> list[list[Optional[DayCell]]]:
        """Rows of seven slots, Sunday first; None pads before day 1 and after the last day."""
        slots: list[Optional[DayCell]] = [None] * self.leading_blanks + list(self.cells)
        slots += [None] * (-len(slots) % 7)
        return [slots[i : i + 7] for i in range(0, len(slots), 7)]


def build_month_grid(year: int, month: int, ledger: ShiftLedger, holidays: HolidayIndex) -> MonthGrid:
    first, last = month_window(year, month)
    # date.weekday(): Monday=0; the grid starts on Sunday.
    leading_blanks = (first.weekday() + 1) % 7

    cells = []
    for day_no in range(1, last.day + 1):
        day = date(year, month, day_no)
        holiday = holidays.get(day)
        cells.append(
            DayCell(
                day=day,
                am=ledger.is_working(day, Period.MORNING),
                pm=ledger.is_working(day, Period.AFTERNOON),
                holiday_name=holiday.name if holiday else None,
            )
        )
    return MonthGrid(year=year, month=month, leading_blanks=leading_blanks, cells=tuple(cells))
