from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        try:
            container.database_check()
        except Exception:
            app.logger.exception("Health check failed")
            return jsonify({"status": "Unhealthy", "database": "Disconnected", "timestamp": now_local().isoformat()}), 503
        return jsonify({"status": "Healthy", "database": "Connected", "timestamp": now_local().isoformat()})
