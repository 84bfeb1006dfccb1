"""
Dashboard composition.

Runs the search filter once per snapshot and derives every view from it.
Nothing is cached: each call recomputes from the snapshot it is given.

Filtered vs unfiltered
----------------------
The category and month breakdowns follow the search query.  The grand
total and the monthly chart are computed from the full snapshot and do
not change while searching.
"""

from __future__ import annotations

from typing import Sequence

from spendboard.models.schemas import DashboardView, Expense
from spendboard.services.category_service import group_by_category
from spendboard.services.month_service import group_by_month
from spendboard.services.search_service import filter_expenses
from spendboard.services.series_service import monthly_series
from spendboard.services.totals_service import sum_amounts


def build_dashboard(
    expenses: Sequence[Expense],
    query: str = "",
    chronological_series: bool = False,
) -> DashboardView:
    filtered = filter_expenses(expenses, query)
    return DashboardView(
        query=query,
        total=sum_amounts(expenses),
        expense_count=len(expenses),
        categories=group_by_category(filtered),
        months=group_by_month(filtered),
        series=monthly_series(expenses, chronological=chronological_series),
    )
