"""
Month aggregation service.

Responsibility: bucket a snapshot of expenses by calendar month, split each
bucket by case-insensitive category, and total both levels.
Pure business logic – no I/O.

Ordering policy
---------------
* Months are ordered newest first by their ``(year, month)`` key, never by
  the display label (``"April"`` sorts before ``"August"`` as text but not
  on the calendar).
* Categories inside a month keep the order in which they are first seen in
  the input.  Callers normally pass the repository feed, which is newest
  first, so the most recently used category leads.
* Items inside a category cell keep input order; they are not re-sorted.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from spendboard.logging_setup import get_logger
from spendboard.models.schemas import Expense, MonthCategoryCell, MonthGroup
from spendboard.services.category_service import category_key
from spendboard.services.totals_service import sum_amounts
from spendboard.utils.time_utils import MonthKey, month_key, month_label

logger = get_logger(__name__)


def group_by_month(expenses: Sequence[Expense]) -> List[MonthGroup]:
    """
    Group *expenses* into :class:`~spendboard.models.schemas.MonthGroup`
    objects, newest month first.

    Each month's ``total`` equals the sum over all of its category cells.

    Raises
    ------
    AttributeError
        If a record's ``date`` is not a calendar date.
    """
    # dicts keep insertion order, which is the first-seen order relied on below
    months: Dict[MonthKey, Dict[str, List[Expense]]] = {}

    for exp in expenses:
        cells = months.setdefault(month_key(exp.date), {})
        cells.setdefault(category_key(exp.category), []).append(exp)

    result: List[MonthGroup] = []
    for key in sorted(months, reverse=True):
        cells = [
            MonthCategoryCell(
                label=items[0].category,
                total=sum_amounts(items),
                items=list(items),
            )
            for items in months[key].values()
        ]
        year, month = key
        result.append(
            MonthGroup(
                year=year,
                month=month,
                label=month_label(key),
                total=sum_amounts(e for cell in cells for e in cell.items),
                categories=cells,
            )
        )

    logger.debug("grouped %d expenses into %d months", len(expenses), len(result))
    return result
