"""
Free-text search over a snapshot of expenses.
"""

from __future__ import annotations

from typing import List, Sequence

from spendboard.models.schemas import Expense


def _matches(expense: Expense, needle: str) -> bool:
    return (
        needle in expense.title.lower()
        or needle in expense.category.lower()
        or needle in (expense.notes or "").lower()
    )


def filter_expenses(expenses: Sequence[Expense], query: str) -> List[Expense]:
    """
    Keep the expenses whose title, category or notes contain *query*.

    Matching is a case-insensitive substring test.  The query is not
    trimmed: an all-whitespace query must occur literally.  An empty query
    keeps everything.  Input order is preserved and *expenses* is never
    modified; a new list is returned either way.
    """
    if not query:
        return list(expenses)

    needle = query.lower()
    return [e for e in expenses if _matches(e, needle)]
