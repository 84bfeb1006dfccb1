from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request

from spendboard import BASE
from spendboard.logging_setup import get_logger
from spendboard.routes import current_owner_id, current_repository
from spendboard.services.validation_service import validate_expense_fields

expenses_bp = Blueprint("expenses", __name__)

logger = get_logger(__name__)


def _json_body() -> Dict[str, Any] | None:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


#Endpoint: list
@expenses_bp.route(f"{BASE}/expenses", methods=["GET"])
def list_expenses() -> tuple[Response, int]:
    expenses = current_repository().list(current_owner_id())
    return jsonify([e.to_dict() for e in expenses]), 200


#Endpoint: create
@expenses_bp.route(f"{BASE}/expenses", methods=["POST"])
def create_expense() -> tuple[Response, int]:
    owner_id = current_owner_id()

    body = _json_body()
    if body is None:
        return jsonify({"error": "Invalid or missing JSON body."}), 400

    try:
        fields = validate_expense_fields(body)
    except ValueError as exc:
        logger.warning("rejected new expense: %s", exc)
        return jsonify({"error": str(exc)}), 422

    expense = current_repository().create(owner_id, fields)
    return jsonify(expense.to_dict()), 201


#Endpoint: update
@expenses_bp.route(f"{BASE}/expenses/<expense_id>", methods=["PUT"])
def update_expense(expense_id: str) -> tuple[Response, int]:
    owner_id = current_owner_id()

    body = _json_body()
    if body is None:
        return jsonify({"error": "Invalid or missing JSON body."}), 400

    try:
        fields = validate_expense_fields(body)
    except ValueError as exc:
        logger.warning("rejected update of %s: %s", expense_id, exc)
        return jsonify({"error": str(exc)}), 422

    expense = current_repository().update(owner_id, expense_id, fields)
    return jsonify(expense.to_dict()), 200


#Endpoint: delete
@expenses_bp.route(f"{BASE}/expenses/<expense_id>", methods=["DELETE"])
def delete_expense(expense_id: str) -> tuple[str, int]:
    current_repository().delete(current_owner_id(), expense_id)
    return "", 204
