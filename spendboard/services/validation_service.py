"""
Expense field validator.

Responsibility: turn a raw create/update payload into
:class:`~spendboard.models.schemas.ExpenseFields`.  This is the only place
business rules on input are enforced; the aggregation services trust what
they are given.

Rules (applied in order):
1. ``title``, ``amount``, ``category`` and ``date`` are required.
2. ``title`` and ``category`` are non-empty strings.
3. ``amount`` converts to a finite number (numeric strings accepted) whose
   magnitude is below ``MAX_AMOUNT``.
4. ``date`` parses as ``YYYY-MM-DD``.
5. ``notes`` is optional; a missing or null value is stored as ``None``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from spendboard.models.schemas import ExpenseFields
from spendboard.utils.financial import MAX_AMOUNT, to_decimal
from spendboard.utils.time_utils import parse_date

REQUIRED_FIELDS = ("title", "amount", "category", "date")


def _require_text(raw: Dict[str, Any], key: str) -> str:
    val = raw[key]
    if not isinstance(val, str):
        raise ValueError(f"Field {key!r} must be a string, got {type(val).__name__}.")
    if not val.strip():
        raise ValueError(f"Field {key!r} must not be empty.")
    return val


def _require_amount(raw: Dict[str, Any]) -> Decimal:
    amount = to_decimal(raw["amount"])
    if abs(amount) >= MAX_AMOUNT:
        raise ValueError(f"Field 'amount' must be smaller than {MAX_AMOUNT:,f} in magnitude.")
    return amount


def _optional_text(raw: Dict[str, Any], key: str) -> Optional[str]:
    val = raw.get(key)
    if val is None:
        return None
    if not isinstance(val, str):
        raise ValueError(f"Field {key!r} must be a string, got {type(val).__name__}.")
    return val


def validate_expense_fields(raw: Dict[str, Any]) -> ExpenseFields:
    """
    Validate *raw* and return typed fields.

    Raises
    ------
    ValueError
        Naming the first field that breaks a rule.
    """
    if not isinstance(raw, dict):
        raise ValueError("Expense payload must be a JSON object.")

    for key in REQUIRED_FIELDS:
        if raw.get(key) is None:
            raise ValueError(f"Missing required field: {key!r}")

    date_raw = raw["date"]
    if not isinstance(date_raw, str):
        raise ValueError(f"Field 'date' must be a string, got {type(date_raw).__name__}.")

    return ExpenseFields(
        title=_require_text(raw, "title"),
        amount=_require_amount(raw),
        category=_require_text(raw, "category"),
        date=parse_date(date_raw),
        notes=_optional_text(raw, "notes"),
    )
