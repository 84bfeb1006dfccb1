from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from spendboard.models.schemas import Expense, ExpenseFields


class ExpenseRepository(ABC):
    """
    Persistence collaborator for expenses.

    Reads raise :class:`~spendboard.errors.FetchError`; writes raise
    :class:`~spendboard.errors.WriteError` (or its subclass
    :class:`~spendboard.errors.ExpenseNotFoundError`).
    """

    @abstractmethod
    def list(self, owner_id: str) -> List[Expense]:
        """Every expense of *owner_id*, newest date first."""

    @abstractmethod
    def create(self, owner_id: str, fields: ExpenseFields) -> Expense:
        pass

    @abstractmethod
    def update(self, owner_id: str, expense_id: str, fields: ExpenseFields) -> Expense:
        pass

    @abstractmethod
    def delete(self, owner_id: str, expense_id: str) -> None:
        pass
