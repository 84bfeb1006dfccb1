from __future__ import annotations

from datetime import date
from decimal import Decimal

from spendboard.models.schemas import Expense


def make_expense(id, title, amount, category, day, notes=None) -> Expense:
    return Expense(
        id=str(id),
        title=title,
        amount=Decimal(str(amount)),
        category=category,
        date=date.fromisoformat(day),
        notes=notes,
    )
