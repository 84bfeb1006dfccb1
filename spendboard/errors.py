"""
Exception hierarchy for spendboard.

The aggregation engine never raises these itself; they describe failures of
the persistence collaborator and are translated to HTTP responses by the
application factory.
"""

from __future__ import annotations


class SpendboardError(Exception):
    """Base class for every error raised by spendboard."""


class FetchError(SpendboardError):
    """The expense store could not be read."""


class WriteError(SpendboardError):
    """The expense store rejected or failed a create / update / delete."""


class ExpenseNotFoundError(WriteError):
    """No expense with the given id exists for the requesting owner."""

    def __init__(self, expense_id: str) -> None:
        super().__init__(f"Expense {expense_id!r} not found.")
        self.expense_id = expense_id
