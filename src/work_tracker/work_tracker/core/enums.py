from __future__ import annotations

from enum import Enum


class Period(str, Enum):
    """Half-day shift stored on a work record."""

    MORNING = "AM"
    AFTERNOON = "PM"
