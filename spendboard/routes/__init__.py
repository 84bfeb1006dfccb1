"""
Shared request helpers for the spendboard blueprints.
"""

from __future__ import annotations

from flask import abort, current_app, request

from spendboard.repository.base import ExpenseRepository

OWNER_HEADER = "X-Owner-Id"


def current_owner_id() -> str:
    """Owner id set by the upstream auth layer; 401 when absent."""
    owner_id = request.headers.get(OWNER_HEADER, "").strip()
    if not owner_id:
        abort(401, description=f"Missing {OWNER_HEADER} header.")
    return owner_id


def current_repository() -> ExpenseRepository:
    from spendboard import REPOSITORY_KEY
    return current_app.extensions[REPOSITORY_KEY]
