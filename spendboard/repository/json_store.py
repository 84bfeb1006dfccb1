from __future__ import annotations

import json
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from spendboard.errors import ExpenseNotFoundError, FetchError, WriteError
from spendboard.logging_setup import get_logger
from spendboard.models.schemas import Expense, ExpenseFields
from spendboard.repository.base import ExpenseRepository
from spendboard.utils.time_utils import format_date

logger = get_logger(__name__)


class JsonExpenseRepository(ExpenseRepository):
    """Expenses for every owner kept in a single JSON document."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()
        self._init_store()

    # ---------- lifecycle ----------

    def _init_store(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self._write({"expenses": []})
        except OSError as exc:
            raise WriteError(f"Cannot initialise expense store at {self.path}: {exc}") from exc

    # ---------- core IO ----------

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            # File deleted mid-run → start again from an empty store
            return {"expenses": []}
        except json.JSONDecodeError as exc:
            logger.error("expense store %s is corrupt: %s", self.path, exc)
            raise FetchError(f"Expense store {self.path} is not valid JSON.") from exc
        except OSError as exc:
            raise FetchError(f"Cannot read expense store {self.path}: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("expenses"), list):
            raise FetchError(f"Expense store {self.path} has an unexpected layout.")
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        tmp = self.path.with_suffix(".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            tmp.replace(self.path)
        except OSError as exc:
            raise WriteError(f"Cannot write expense store {self.path}: {exc}") from exc

    # ---------- public API ----------

    def list(self, owner_id: str) -> List[Expense]:
        with self._lock:
            data = self._read()
        try:
            expenses = [
                Expense.from_record(r)
                for r in data["expenses"]
                if r.get("owner_id") == owner_id
            ]
        except (KeyError, ValueError) as exc:
            raise FetchError(f"Malformed expense record in {self.path}: {exc}") from exc
        # stable: equal dates keep insertion order
        expenses.sort(key=lambda e: e.date, reverse=True)
        return expenses

    def create(self, owner_id: str, fields: ExpenseFields) -> Expense:
        expense = Expense(
            id=uuid.uuid4().hex,
            title=fields.title,
            amount=fields.amount,
            category=fields.category,
            date=fields.date,
            notes=fields.notes,
            owner_id=owner_id,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        with self._lock:
            data = self._read_for_write()
            data["expenses"].append(expense.to_record())
            self._write(data)

        logger.info("created expense %s for owner %s", expense.id, owner_id)
        return expense

    def update(self, owner_id: str, expense_id: str, fields: ExpenseFields) -> Expense:
        with self._lock:
            data = self._read_for_write()
            record = self._find(data, owner_id, expense_id)
            record.update(
                title=fields.title,
                amount=str(fields.amount),
                category=fields.category,
                date=format_date(fields.date),
                notes=fields.notes,
            )
            self._write(data)

        logger.info("updated expense %s for owner %s", expense_id, owner_id)
        return Expense.from_record(record)

    def delete(self, owner_id: str, expense_id: str) -> None:
        with self._lock:
            data = self._read_for_write()
            record = self._find(data, owner_id, expense_id)
            data["expenses"].remove(record)
            self._write(data)

        logger.info("deleted expense %s for owner %s", expense_id, owner_id)

    # ---------- helpers ----------

    def _read_for_write(self) -> Dict[str, Any]:
        try:
            return self._read()
        except FetchError as exc:
            raise WriteError(str(exc)) from exc

    @staticmethod
    def _find(data: Dict[str, Any], owner_id: str, expense_id: str) -> Dict[str, Any]:
        for record in data["expenses"]:
            if record.get("id") == expense_id and record.get("owner_id") == owner_id:
                return record
        raise ExpenseNotFoundError(expense_id)
