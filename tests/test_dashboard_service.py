from decimal import Decimal

from spendboard.services.dashboard_service import build_dashboard


def test_search_narrows_breakdowns_but_not_total_or_chart(sample_expenses):
    view = build_dashboard(sample_expenses, "bus")

    assert view.total == Decimal("19.25")
    assert view.expense_count == 3
    assert [g.label for g in view.categories] == ["Transport"]
    assert [m.label for m in view.months] == ["March 2024"]
    assert view.series.labels == ["March 2024", "April 2024"]


def test_dashboard_to_dict(sample_expenses):
    data = build_dashboard(sample_expenses).to_dict()

    assert data["totalDisplay"] == "$19.25"
    assert data["categories"][0]["label"] == "Food"
    assert data["categories"][0]["total"] == 16.5
    assert data["categories"][0]["totalDisplay"] == "$16.50"
    assert data["months"][0]["label"] == "April 2024"
    assert data["months"][1]["totalDisplay"] == "$7.25"
    assert data["series"] == {
        "name": "Monthly Spending",
        "labels": ["March 2024", "April 2024"],
        "values": [7.25, 12.0],
    }


def test_empty_snapshot():
    view = build_dashboard([], "anything")

    assert view.total == 0
    assert view.categories == []
    assert view.months == []
    assert view.series.labels == []


def test_recomputes_from_each_snapshot(sample_expenses):
    first = build_dashboard(sample_expenses[:1])
    second = build_dashboard(sample_expenses)

    assert first.total == Decimal("4.5")
    assert second.total == Decimal("19.25")
