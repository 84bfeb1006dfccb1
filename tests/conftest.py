from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
from flask import Flask
from flask.testing import FlaskClient

from spendboard import create_app
from spendboard.config import Config
from spendboard.models.schemas import Expense

from helpers import make_expense


@pytest.fixture
def app(tmp_path: Path) -> Flask:
    config = Config(data_path=tmp_path / "store" / "expenses.json", log_level="DEBUG")
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def owner_headers() -> dict:
    return {"X-Owner-Id": "owner-1"}


@pytest.fixture
def sample_expenses() -> List[Expense]:
    return [
        make_expense(1, "Coffee", 4.5, "Food", "2024-03-01"),
        make_expense(2, "Bus", 2.75, "Transport", "2024-03-15"),
        make_expense(3, "Lunch", 12, "food", "2024-04-02"),
    ]


@pytest.fixture
def record_sets(sample_expenses: List[Expense]) -> List[List[Expense]]:
    """A handful of snapshots used for the property-style tests."""
    return [
        [],
        sample_expenses,
        [
            make_expense("a", "Rent", 1200, "Housing", "2024-01-01", "January rent"),
            make_expense("b", "Groceries", 85.20, "FOOD", "2024-01-14"),
            make_expense("c", "Refund", -20, "food", "2024-02-03", "returned item"),
            make_expense("d", "Train", 15, "Transport", "2023-12-30"),
            make_expense("e", "Snacks", 3.10, "Food", "2024-01-14", "bus station"),
            make_expense("f", "Book", 18.99, "Leisure", "2024-02-29"),
        ],
        [
            make_expense("x", "Tea", 2, "Drinks", "2022-08-08"),
            make_expense("y", "Tea", 2, "drinks", "2022-08-08"),
            make_expense("z", "Tea", 2, "Drinks", "2022-04-08"),
        ],
    ]
