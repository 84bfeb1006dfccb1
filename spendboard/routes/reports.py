"""
Report routes.

Every endpoint reloads the owner's full snapshot from the repository and
recomputes its view from scratch.

Endpoints
---------
GET /spendboard/v1/reports/dashboard?q=&chronological=
GET /spendboard/v1/reports/categories?q=
GET /spendboard/v1/reports/months?q=
GET /spendboard/v1/reports/series?chronological=
GET /spendboard/v1/reports/total
"""

from __future__ import annotations

from typing import List

from flask import Blueprint, Response, jsonify, request

from spendboard import BASE
from spendboard.models.schemas import Expense
from spendboard.routes import current_owner_id, current_repository
from spendboard.services.category_service import group_by_category
from spendboard.services.dashboard_service import build_dashboard
from spendboard.services.month_service import group_by_month
from spendboard.services.search_service import filter_expenses
from spendboard.services.series_service import monthly_series
from spendboard.services.totals_service import sum_amounts
from spendboard.utils.financial import decimal_to_float, format_currency

reports_bp = Blueprint("reports", __name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _query() -> str:
    # not stripped: whitespace is a literal search term
    return request.args.get("q", "")


def _flag(name: str) -> bool:
    return request.args.get(name, "").strip().lower() in _TRUTHY


def _snapshot() -> List[Expense]:
    return current_repository().list(current_owner_id())


@reports_bp.route(f"{BASE}/reports/dashboard", methods=["GET"])
def dashboard() -> tuple[Response, int]:
    view = build_dashboard(_snapshot(), _query(), chronological_series=_flag("chronological"))
    return jsonify(view.to_dict()), 200


@reports_bp.route(f"{BASE}/reports/categories", methods=["GET"])
def categories() -> tuple[Response, int]:
    groups = group_by_category(filter_expenses(_snapshot(), _query()))
    return jsonify([g.to_dict() for g in groups]), 200


@reports_bp.route(f"{BASE}/reports/months", methods=["GET"])
def months() -> tuple[Response, int]:
    groups = group_by_month(filter_expenses(_snapshot(), _query()))
    return jsonify([m.to_dict() for m in groups]), 200


@reports_bp.route(f"{BASE}/reports/series", methods=["GET"])
def series() -> tuple[Response, int]:
    result = monthly_series(_snapshot(), chronological=_flag("chronological"))
    return jsonify(result.to_dict()), 200


@reports_bp.route(f"{BASE}/reports/total", methods=["GET"])
def total() -> tuple[Response, int]:
    amount = sum_amounts(_snapshot())
    return jsonify({"total": decimal_to_float(amount), "display": format_currency(amount)}), 200
