"""Example: use the service layer directly (no Flask).

Prints the working-day total and salary for one month.
"""

import importlib
import sys

from config import get_settings_module

from src.work_tracker.work_tracker.container import build_container


def main():
    year, month = (int(sys.argv[1]), int(sys.argv[2])) if len(sys.argv) > 2 else (2026, 1)

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        monthly_base_salary=settings.MONTHLY_BASE_SALARY,
        salary_divisor=settings.SALARY_DIVISOR,
        currency=settings.CURRENCY,
    )
    print(container.summary_service.summarize(year, month).to_dict(currency=container.currency))


if __name__ == "__main__":
    main()
