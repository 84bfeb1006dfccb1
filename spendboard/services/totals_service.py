"""
Total calculator.

Shared by every aggregator and by the grand-total display.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from spendboard.models.schemas import Expense
from spendboard.utils.financial import ZERO


def sum_amounts(expenses: Iterable[Expense]) -> Decimal:
    """Arithmetic sum of ``amount``; an empty input sums to ``0``."""
    return sum((e.amount for e in expenses), ZERO)
