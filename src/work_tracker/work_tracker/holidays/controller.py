from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays/<int:year>", endpoint="api_holidays")
    def api_holidays(year: int):
        if not 1 <= year <= 9999:
            return jsonify({"success": False, "message": f"Year out of range: {year}"}), 400

        index = container.holiday_service.load(year)
        return jsonify(
            {
                "success": True,
                "year": year,
                "data_available": index.available,
                "holidays": [h.to_dict() for h in index],
            }
        )
