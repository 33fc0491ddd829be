from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        user = container.user_service.identify(json_body().get("nombre"))
        return jsonify({"id": user.user_id, "nombre": user.name})
