from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import iso, json_body
from ..common.validators import require_user_id
from ..container import Container
from .model import Shift, ShiftReportRow


def shift_json(shift: Shift) -> dict:
    return {
        "id": shift.shift_id,
        "userId": shift.user_id,
        "entrada": iso(shift.started_at),
        "salida": iso(shift.ended_at),
        "tiempo_total": shift.elapsed_minutes,
    }


def record_json(row: ShiftReportRow) -> dict:
    return {
        "id": row.shift_id,
        "nombre": row.name,
        "entrada": iso(row.started_at),
        "salida": iso(row.ended_at),
        "tiempo_total": row.elapsed_minutes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/entrada", methods=["POST"], endpoint="clock_in")
    def clock_in():
        shift = container.shift_tracker.clock_in(json_body().get("userId"))
        return jsonify({"success": True, "registro": shift_json(shift)})

    @app.route("/salida", methods=["POST"], endpoint="clock_out")
    def clock_out():
        shift = container.shift_tracker.clock_out(json_body().get("userId"))
        return jsonify({"success": True, "registro": shift_json(shift), "minutos": shift.elapsed_minutes})

    @app.route("/registros", methods=["GET"], endpoint="records")
    def records():
        return jsonify([record_json(r) for r in container.shift_tracker.list_records()])

    @app.route("/estado/<user_id>", methods=["GET"], endpoint="shift_status")
    def shift_status(user_id: str):
        uid = require_user_id(user_id)
        shift = container.shift_tracker.current_shift(uid)
        return jsonify(
            {
                "userId": uid,
                "activo": shift is not None,
                "registro": shift_json(shift) if shift else None,
            }
        )
