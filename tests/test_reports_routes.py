import pytest

BASE = "/spendboard/v1"

SCENARIO_A = [
    {"title": "Coffee", "amount": 4.5, "category": "Food", "date": "2024-03-01"},
    {"title": "Bus", "amount": 2.75, "category": "Transport", "date": "2024-03-15"},
    {"title": "Lunch", "amount": 12, "category": "food", "date": "2024-04-02"},
]


@pytest.fixture
def seeded(client, owner_headers):
    ids = []
    for payload in SCENARIO_A:
        response = client.post(f"{BASE}/expenses", json=payload, headers=owner_headers)
        assert response.status_code == 201
        ids.append(response.get_json()["id"])
    return ids


def test_categories(client, owner_headers, seeded):
    data = client.get(f"{BASE}/reports/categories", headers=owner_headers).get_json()

    assert [g["label"] for g in data] == ["food", "Transport"]
    assert data[0]["total"] == 16.5
    assert [e["title"] for e in data[0]["items"]] == ["Lunch", "Coffee"]


def test_categories_with_search(client, owner_headers, seeded):
    data = client.get(
        f"{BASE}/reports/categories", query_string={"q": "bus"}, headers=owner_headers
    ).get_json()

    assert [g["label"] for g in data] == ["Transport"]


def test_months(client, owner_headers, seeded):
    data = client.get(f"{BASE}/reports/months", headers=owner_headers).get_json()

    assert [m["label"] for m in data] == ["April 2024", "March 2024"]
    assert [m["total"] for m in data] == [12, 7.25]
    # repository feed is newest first, so Transport (Mar 15) leads in March
    assert [c["label"] for c in data[1]["categories"]] == ["Transport", "Food"]


def test_series(client, owner_headers, seeded):
    data = client.get(f"{BASE}/reports/series", headers=owner_headers).get_json()
    chrono = client.get(
        f"{BASE}/reports/series", query_string={"chronological": "true"}, headers=owner_headers
    ).get_json()

    assert data["labels"] == ["April 2024", "March 2024"]
    assert data["values"] == [12, 7.25]
    assert chrono["labels"] == ["March 2024", "April 2024"]


def test_total_ignores_nothing(client, owner_headers, seeded):
    data = client.get(f"{BASE}/reports/total", headers=owner_headers).get_json()

    assert data == {"total": 19.25, "display": "$19.25"}


def test_dashboard_search_keeps_chart_and_total(client, owner_headers, seeded):
    data = client.get(
        f"{BASE}/reports/dashboard", query_string={"q": "BUS"}, headers=owner_headers
    ).get_json()

    assert data["query"] == "BUS"
    assert data["totalDisplay"] == "$19.25"
    assert data["expenseCount"] == 3
    assert [g["label"] for g in data["categories"]] == ["Transport"]
    assert [m["label"] for m in data["months"]] == ["March 2024"]
    assert data["series"]["labels"] == ["April 2024", "March 2024"]


def test_dashboard_reflects_deletes(client, owner_headers, seeded):
    client.delete(f"{BASE}/expenses/{seeded[2]}", headers=owner_headers)

    data = client.get(f"{BASE}/reports/dashboard", headers=owner_headers).get_json()

    assert data["total"] == 7.25
    assert [m["label"] for m in data["months"]] == ["March 2024"]


def test_empty_dashboard(client, owner_headers):
    data = client.get(f"{BASE}/reports/dashboard", headers=owner_headers).get_json()

    assert data["total"] == 0
    assert data["months"] == []
    assert data["series"] == {"name": "Monthly Spending", "labels": [], "values": []}
