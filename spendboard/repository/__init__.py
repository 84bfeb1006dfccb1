from spendboard.repository.base import ExpenseRepository
from spendboard.repository.json_store import JsonExpenseRepository

__all__ = ["ExpenseRepository", "JsonExpenseRepository"]
