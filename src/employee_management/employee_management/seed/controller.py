from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.enums import Role
from ..users.guards import roles_required


def _done(message: str):
    return jsonify({"message": message, "timestamp": now_local().isoformat()})


def _failed(message: str, error: Exception):
    return jsonify({"message": message, "error": str(error)}), 500


def register(app: Flask, container: Container) -> None:
    service = container.seed_service
    auth = container.auth_service

    @app.route("/api/seed/seed", methods=["POST"], endpoint="seed_seed")
    @roles_required(auth, Role.ADMIN)
    def seed():
        try:
            app.logger.info("Starting database seeding")
            service.seed()
            return _done("Database seeded successfully")
        except Exception as e:
            app.logger.exception("Error occurred during database seeding")
            return _failed("Error occurred during seeding", e)

    @app.route("/api/seed/reseed", methods=["POST"], endpoint="seed_reseed")
    @roles_required(auth, Role.ADMIN)
    def reseed():
        try:
            app.logger.info("Starting database reseeding")
            service.reseed()
            return _done("Database reseeded successfully")
        except Exception as e:
            app.logger.exception("Error occurred during database reseeding")
            return _failed("Error occurred during reseeding", e)

    @app.route("/api/seed/clear", methods=["DELETE"], endpoint="seed_clear")
    @roles_required(auth, Role.ADMIN)
    def clear():
        try:
            service.clear()
            return _done("Database cleared successfully")
        except Exception as e:
            app.logger.exception("Error occurred during database clearing")
            return _failed("Error occurred during clearing", e)

    @app.route("/api/seed/status", methods=["GET"], endpoint="seed_status")
    @roles_required(auth, Role.ADMIN)
    def status():
        try:
            s = service.status()
            return jsonify(
                {
                    "departments": s.departments,
                    "employees": s.employees,
                    "attendances": s.attendances,
                    "performanceMetrics": s.performance_metrics,
                    "users": s.users,
                    "timestamp": now_local().isoformat(),
                }
            )
        except Exception as e:
            app.logger.exception("Error occurred while getting seed status")
            return _failed("Error occurred while getting status", e)
