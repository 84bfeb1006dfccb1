"""
Application factory: configuration, logging, expense repository, JSON error
handlers and blueprints.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import Flask, Response, jsonify

from spendboard.config import Config, load_config
from spendboard.errors import ExpenseNotFoundError, FetchError, WriteError
from spendboard.logging_setup import configure_logging, get_logger

BASE = "/spendboard/v1"
REPOSITORY_KEY = "spendboard.repository"

logger = get_logger(__name__)


def create_app(config: Optional[Config] = None) -> Flask:
    """Create and configure the Flask application."""
    from spendboard.repository import JsonExpenseRepository

    config = config or load_config()
    configure_logging(config.log_level)

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["SPENDBOARD"] = config
    app.extensions[REPOSITORY_KEY] = JsonExpenseRepository(config.data_path)

    # ── Error handlers ──────────────────────────────────────────────────────

    @app.errorhandler(400)
    def bad_request(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Bad Request", "message": str(exc)}), 400

    @app.errorhandler(401)
    def unauthorized(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Unauthorized", "message": str(exc)}), 401

    @app.errorhandler(404)
    def not_found(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Not Found", "message": str(exc)}), 404

    @app.errorhandler(405)
    def method_not_allowed(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Method Not Allowed", "message": str(exc)}), 405

    @app.errorhandler(ExpenseNotFoundError)
    def expense_not_found(exc: ExpenseNotFoundError) -> tuple[Response, int]:
        logger.warning("%s", exc)
        return jsonify({"error": "Not Found", "message": str(exc)}), 404

    @app.errorhandler(FetchError)
    @app.errorhandler(WriteError)
    def store_failure(exc: Exception) -> tuple[Response, int]:
        logger.warning("expense store failure: %s", exc)
        return jsonify({"error": "Bad Gateway", "message": str(exc)}), 502

    @app.errorhandler(500)
    def internal_error(exc: Any) -> tuple[Response, int]:
        return jsonify({"error": "Internal Server Error", "message": str(exc)}), 500

    # ── Register blueprints ─────────────────────────────────────────────────

    from spendboard.routes.expenses import expenses_bp
    from spendboard.routes.reports import reports_bp

    app.register_blueprint(expenses_bp)
    app.register_blueprint(reports_bp)

    logger.info("spendboard ready, expense store at %s", config.data_path)

    return app

