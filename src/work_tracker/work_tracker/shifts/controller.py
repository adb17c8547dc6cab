from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_window
from ..common.validators import require_date, require_month, require_period
from ..core.exceptions import ValidationError, WriteRejected
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/months/<int:year>/<int:month>/shifts", endpoint="api_month_shifts")
    def api_month_shifts(year: int, month: int):
        try:
            year, month = require_month(year, month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        start, end = month_window(year, month)
        ledger = container.shift_service.load(start, end)
        return jsonify(
            {
                "success": True,
                "year": year,
                "month": month,
                "data_available": ledger.available,
                "records": [r.to_dict() for r in ledger.records()],
            }
        )

    @app.route("/api/shifts/toggle", methods=["POST"], endpoint="api_shift_toggle")
    def api_shift_toggle():
        data = request.get_json(silent=True) or {}
        try:
            work_date = require_date(data.get("date"))
            period = require_period(data.get("period"))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        ledger = container.calendar_state.ledger_for(work_date.year, work_date.month)
        try:
            result = container.shift_service.toggle(work_date, period, ledger=ledger)
        except WriteRejected as e:
            return jsonify({"success": False, "message": str(e)}), 502

        container.calendar_state.apply_toggle(result.record)
        return jsonify({"success": True, "record": result.record.to_dict()})
