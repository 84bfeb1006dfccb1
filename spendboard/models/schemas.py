"""
Immutable data models / schemas for spendboard.

These dataclasses travel between the route → service → repository layers.
No business logic lives here, only conversion to and from JSON-ready dicts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional

from spendboard.utils.financial import decimal_to_float, format_currency, to_decimal
from spendboard.utils.time_utils import format_date, format_display_date, parse_date


#Stored record
@dataclass(frozen=True)
class Expense:
    """A single recorded expense, as returned by the repository."""
    id: str
    title: str
    amount: Decimal
    category: str
    date: date
    notes: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "amount": decimal_to_float(self.amount),
            "amountDisplay": format_currency(self.amount),
            "category": self.category,
            "date": format_date(self.date),
            "displayDate": format_display_date(self.date),
            "notes": self.notes,
        }

    def to_record(self) -> dict:
        """Storage form: exact amount as a string, owner and audit fields kept."""
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "title": self.title,
            "amount": str(self.amount),
            "category": self.category,
            "date": format_date(self.date),
            "notes": self.notes,
            "created_at": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: Dict[str, Any]) -> "Expense":
        """
        Inverse of :meth:`to_record`.

        Raises
        ------
        ValueError
            If the stored ``date`` or ``amount`` cannot be parsed.
        KeyError
            If a required field is missing.
        """
        return cls(
            id=str(raw["id"]),
            title=raw["title"],
            amount=to_decimal(raw["amount"]),
            category=raw["category"],
            date=parse_date(raw["date"]),
            notes=raw.get("notes"),
            owner_id=raw.get("owner_id"),
            created_at=raw.get("created_at"),
        )


#Write payload
@dataclass(frozen=True)
class ExpenseFields:
    """Validated user-editable fields for a create or update."""
    title: str
    amount: Decimal
    category: str
    date: date
    notes: Optional[str] = None


#Category view
@dataclass(frozen=True)
class CategoryGroup:
    """All expenses sharing one case-insensitive category."""
    label: str
    total: Decimal
    items: List[Expense]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "total": decimal_to_float(self.total),
            "totalDisplay": format_currency(self.total),
            "items": [e.to_dict() for e in self.items],
        }


#Month view
@dataclass(frozen=True)
class MonthCategoryCell:
    """The expenses of one category inside one month bucket."""
    label: str
    total: Decimal
    items: List[Expense]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "total": decimal_to_float(self.total),
            "totalDisplay": format_currency(self.total),
            "items": [e.to_dict() for e in self.items],
        }


@dataclass(frozen=True)
class MonthGroup:
    """One calendar month bucket, split by category."""
    year: int
    month: int
    label: str
    total: Decimal
    categories: List[MonthCategoryCell]

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "year": self.year,
            "month": self.month,
            "total": decimal_to_float(self.total),
            "totalDisplay": format_currency(self.total),
            "categories": [c.to_dict() for c in self.categories],
        }


#Chart series
@dataclass(frozen=True)
class MonthlySeries:
    """Parallel label / value lists: ``labels[i]`` belongs to ``values[i]``."""
    labels: List[str] = field(default_factory=list)
    values: List[Decimal] = field(default_factory=list)
    name: str = "Monthly Spending"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "labels": list(self.labels),
            "values": [decimal_to_float(v) for v in self.values],
        }


#Dashboard
@dataclass(frozen=True)
class DashboardView:
    """Every derived view of one snapshot, computed together."""
    query: str
    total: Decimal
    expense_count: int
    categories: List[CategoryGroup]
    months: List[MonthGroup]
    series: MonthlySeries

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "total": decimal_to_float(self.total),
            "totalDisplay": format_currency(self.total),
            "expenseCount": self.expense_count,
            "categories": [c.to_dict() for c in self.categories],
            "months": [m.to_dict() for m in self.months],
            "series": self.series.to_dict(),
        }
