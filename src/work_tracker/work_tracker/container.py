from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from .calendar_view.state import CalendarState
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_CURRENCY, DEFAULT_MONTHLY_BASE_SALARY, DEFAULT_SALARY_DIVISOR
from .core.exceptions import ValidationError
from .database.connection import DBConfig, DatabaseConnection
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayIndexService
from .payroll.service import MonthlySummaryService
from .shifts.mysql_shift_repository import MySQLWorkShiftRepository
from .shifts.repository import WorkShiftRepository
from .shifts.service import ShiftLedgerService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    shifts_repo: WorkShiftRepository
    holidays_repo: HolidayRepository

    shift_service: ShiftLedgerService
    holiday_service: HolidayIndexService
    summary_service: MonthlySummaryService

    calendar_state: CalendarState
    currency: str


def compute_daily_rate(monthly_base_salary, salary_divisor) -> Decimal:
    """monthly_base_salary / salary_divisor, e.g. 8500 / 26."""
    try:
        base = Decimal(str(monthly_base_salary))
        divisor = Decimal(str(salary_divisor))
    except InvalidOperation:
        raise ValidationError(
            f"Invalid pay settings: base={monthly_base_salary!r} divisor={salary_divisor!r}"
        ) from None

    if base < 0:
        raise ValidationError("MONTHLY_BASE_SALARY must not be negative")
    if divisor <= 0:
        raise ValidationError("SALARY_DIVISOR must be positive")
    return base / divisor


def assemble(
    *,
    shifts_repo: WorkShiftRepository,
    holidays_repo: HolidayRepository,
    daily_rate: Decimal,
    currency: str = DEFAULT_CURRENCY,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    shift_service = ShiftLedgerService(shifts_repo)
    holiday_service = HolidayIndexService(holidays_repo)
    summary_service = MonthlySummaryService(shift_service, holiday_service, daily_rate=daily_rate)

    today = now_local().date()
    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        holidays_repo=holidays_repo,
        shift_service=shift_service,
        holiday_service=holiday_service,
        summary_service=summary_service,
        calendar_state=CalendarState(today.year, today.month),
        currency=currency,
    )


def build_container(
    *,
    db_config: dict,
    monthly_base_salary=DEFAULT_MONTHLY_BASE_SALARY,
    salary_divisor=DEFAULT_SALARY_DIVISOR,
    currency: str = DEFAULT_CURRENCY,
) -> Container:
    daily_rate = compute_daily_rate(monthly_base_salary, salary_divisor)
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        shifts_repo=MySQLWorkShiftRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        daily_rate=daily_rate,
        currency=currency,
        conn=conn,
    )
