from __future__ import annotations

import logging

from ..common.datetime_utils import year_window
from ..core.exceptions import DataUnavailable
from .index import HolidayIndex
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayIndexService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def load(self, year: int) -> HolidayIndex:
        start, end = year_window(year)
        try:
            holidays = self._holidays.list_range(start=start, end=end)
        except DataUnavailable as e:
            logger.warning("Holidays unavailable for %d: %s", year, e)
            return HolidayIndex(year, available=False)
        return HolidayIndex(year, holidays)
