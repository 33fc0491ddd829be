from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import iso
from ..container import Container
from ..core.constants import DEFAULT_SUMMARY_LIMIT
from ..hours.aggregator import format_hours
from .model import Summary


def summary_json(s: Summary) -> dict:
    return {
        "id": s.summary_id,
        "userId": s.user_id,
        "nombre": s.name,
        "tipo": s.period_kind.value,
        "inicio": iso(s.period_start),
        "fin": iso(s.period_end),
        "horas": format_hours(s.hours),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/resumenes", methods=["GET"], endpoint="summaries")
    def summaries():
        rows = container.archival_service.list_summaries(
            user_id=request.args.get("userId"),
            period_kind=request.args.get("tipo"),
            limit=request.args.get("limit", DEFAULT_SUMMARY_LIMIT, type=int),
        )
        return jsonify([summary_json(s) for s in rows])
