from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import require_user_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    hours = container.hours_service

    # The bare paths exist so a missing userId answers 400 instead of 404.
    @app.route("/contador-semanal/", defaults={"user_id": ""}, methods=["GET"], endpoint="weekly_counter_missing")
    @app.route("/contador-semanal/<user_id>", methods=["GET"], endpoint="weekly_counter")
    def weekly_counter(user_id: str):
        uid = require_user_id(user_id)
        return jsonify({"userId": uid, "horas": hours.weekly_hours(uid)})

    @app.route("/contador-mensual/", defaults={"user_id": ""}, methods=["GET"], endpoint="monthly_counter_missing")
    @app.route("/contador-mensual/<user_id>", methods=["GET"], endpoint="monthly_counter")
    def monthly_counter(user_id: str):
        uid = require_user_id(user_id)
        return jsonify({"userId": uid, "horas": hours.monthly_hours(uid)})

    @app.route("/resumen-semanal", methods=["GET"], endpoint="weekly_summary")
    def weekly_summary():
        breakdown = hours.weekly_breakdown()
        return jsonify([{"nombre": name, "horas": h} for name, h in breakdown.items()])

    @app.route("/resumen-mensual", methods=["GET"], endpoint="monthly_summary")
    def monthly_summary():
        breakdown = hours.monthly_breakdown()
        return jsonify([{"nombre": name, "horas": h} for name, h in breakdown.items()])
