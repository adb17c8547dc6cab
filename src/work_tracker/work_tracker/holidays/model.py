from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Holiday:
    """Domain entity: a paid holiday. Read-only for this application."""

    holiday_date: date
    name: str
    on_shift_multiplier: Decimal
    # Stored and shown, but not used by the salary calculation.
    off_shift_multiplier: Decimal

    def to_dict(self) -> dict:
        return {
            "date": self.holiday_date.isoformat(),
            "name": self.name,
            "on_shift_multiplier": str(self.on_shift_multiplier),
            "off_shift_multiplier": str(self.off_shift_multiplier),
        }
