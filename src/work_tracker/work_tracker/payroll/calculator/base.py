from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import DayAggregate


class DayCreditCalculator(ABC):
    """Calculator interface (Strategy Pattern for working-day credit)."""

    @abstractmethod
    def credit(self, day: DayAggregate) -> Decimal:
        raise NotImplementedError
