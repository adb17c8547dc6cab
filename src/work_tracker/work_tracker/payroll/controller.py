from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import require_month
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/months/<int:year>/<int:month>/summary", endpoint="api_month_summary")
    def api_month_summary(year: int, month: int):
        try:
            total = container.summary_service.summarize(year, month)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        return jsonify({"success": True, **total.to_dict(currency=container.currency)})
