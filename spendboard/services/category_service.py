"""
Category aggregation service.

Responsibility: partition a snapshot of expenses by case-insensitive
category and total each group.  Pure business logic – no I/O.

Ordering policy
---------------
* Groups are first collected in the order their category is first seen in
  the input; the display label is that first record's category text.
* Groups are then sorted by label, case-insensitively.  The sort is stable,
  so any remaining tie keeps first-seen order.
* Items inside a group are sorted newest date first.  Python's sort is
  stable (also with ``reverse=True``), so equal dates keep input order.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from spendboard.logging_setup import get_logger
from spendboard.models.schemas import CategoryGroup, Expense
from spendboard.services.totals_service import sum_amounts

logger = get_logger(__name__)


def category_key(category: str) -> str:
    """Grouping key: two categories are the same group iff their keys match."""
    return category.lower()


def group_by_category(expenses: Sequence[Expense]) -> List[CategoryGroup]:
    """
    Group *expenses* into :class:`~spendboard.models.schemas.CategoryGroup`
    objects ordered alphabetically by label.

    Parameters
    ----------
    expenses:
        Usually the output of
        :func:`~spendboard.services.search_service.filter_expenses`.

    Returns
    -------
    list[CategoryGroup]
        A fresh list; *expenses* is left untouched.

    Raises
    ------
    TypeError
        If one group mixes calendar dates with values that cannot be
        compared to them.

    Notes
    -----
    Records are trusted to carry ``datetime.date`` values.  A group whose
    dates are all some other mutually comparable type (ISO strings, say)
    is still sorted, by that type's own ordering, so the position of such
    a record is ill-defined rather than an error.  Parsing at the boundary
    (:func:`~spendboard.utils.time_utils.parse_date`) is what rules this out.
    """
    labels: Dict[str, str] = {}
    buckets: Dict[str, List[Expense]] = {}

    for exp in expenses:
        key = category_key(exp.category)
        if key not in buckets:
            labels[key] = exp.category
            buckets[key] = []
        buckets[key].append(exp)

    groups = [
        CategoryGroup(
            label=labels[key],
            total=sum_amounts(items),
            items=sorted(items, key=lambda e: e.date, reverse=True),
        )
        for key, items in buckets.items()
    ]
    groups.sort(key=lambda g: category_key(g.label))

    logger.debug("grouped %d expenses into %d categories", len(expenses), len(groups))
    return groups
