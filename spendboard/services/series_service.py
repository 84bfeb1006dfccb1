"""
Monthly spending series for charting.

Built from the *unfiltered* snapshot so that typing in the search box never
reshapes the chart.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Sequence

from spendboard.models.schemas import Expense, MonthlySeries
from spendboard.utils.financial import ZERO
from spendboard.utils.time_utils import MonthKey, month_key, month_label


def monthly_series(
    expenses: Sequence[Expense],
    chronological: bool = False,
) -> MonthlySeries:
    """
    Total spend per calendar month as parallel ``labels`` / ``values``.

    By default buckets appear in the order they are first encountered in
    *expenses*.  With ``chronological=True`` they are emitted oldest month
    first instead.  An empty input yields an empty series.
    """
    totals: Dict[MonthKey, Decimal] = {}
    for exp in expenses:
        key = month_key(exp.date)
        totals[key] = totals.get(key, ZERO) + exp.amount

    keys = sorted(totals) if chronological else list(totals)
    return MonthlySeries(
        labels=[month_label(k) for k in keys],
        values=[totals[k] for k in keys],
    )
