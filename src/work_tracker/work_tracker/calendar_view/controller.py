from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, send_from_directory, url_for

from ..common.datetime_utils import month_window, now_local
from ..common.validators import require_date, require_month, require_period
from ..core.exceptions import ValidationError, WriteRejected
from ..container import Container
from .grid import WEEKDAY_NAMES, build_month_grid


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="index")
    def index():
        today = now_local().date()
        return redirect(url_for("calendar_month", year=today.year, month=today.month))

    @app.route("/calendar/<int:year>/<int:month>", endpoint="calendar_month")
    def calendar_month(year: int, month: int):
        try:
            year, month = require_month(year, month)
        except ValidationError:
            abort(404)

        ticket = container.calendar_state.select(year, month)
        start, end = month_window(year, month)
        ledger = container.shift_service.load(start, end)
        holidays = container.holiday_service.load(year)
        container.calendar_state.accept(ticket, ledger=ledger, holidays=holidays)

        grid = build_month_grid(year, month, ledger, holidays)
        summary = container.summary_service.compute(year, month, ledger, holidays)
        if not summary.data_available:
            flash("Some data could not be loaded; totals may be incomplete.", "warning")

        return render_template(
            "calendar.html",
            grid=grid,
            weekdays=WEEKDAY_NAMES,
            summary=summary.to_dict(currency=container.currency),
        )

    @app.route("/calendar/toggle", methods=["POST"], endpoint="calendar_toggle")
    def calendar_toggle():
        today = now_local().date()
        try:
            work_date = require_date(request.form.get("date"))
            period = require_period(request.form.get("period"))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("calendar_month", year=today.year, month=today.month))

        ledger = container.calendar_state.ledger_for(work_date.year, work_date.month)
        try:
            result = container.shift_service.toggle(work_date, period, ledger=ledger)
            container.calendar_state.apply_toggle(result.record)
        except WriteRejected:
            flash(f"Could not save {period.value} on {work_date.isoformat()}. Please try again.", "danger")

        return redirect(url_for("calendar_month", year=work_date.year, month=work_date.month))

    @app.route("/sw.js", endpoint="service_worker")
    def service_worker():
        # Served from the root so the worker's scope covers the whole site.
        return send_from_directory(app.static_folder, "sw.js", mimetype="application/javascript")
