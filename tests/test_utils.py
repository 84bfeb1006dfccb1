from datetime import date
from decimal import Decimal

import pytest

from spendboard.utils.financial import format_currency, to_decimal
from spendboard.utils.time_utils import (
    format_display_date,
    month_key,
    month_label,
    parse_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("0"), "$0.00"),
        (Decimal("16.5"), "$16.50"),
        (Decimal("1234567.891"), "$1,234,567.89"),
        (Decimal("-4.5"), "-$4.50"),
        (Decimal("0.005"), "$0.01"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_to_decimal_avoids_float_drift():
    assert to_decimal(0.1) + to_decimal(0.2) == Decimal("0.3")


def test_parse_date():
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    with pytest.raises(ValueError, match="YYYY-MM-DD"):
        parse_date("2023-02-29")


def test_month_helpers():
    d = date(2024, 3, 17)

    assert month_key(d) == (2024, 3)
    assert month_label(month_key(d)) == "March 2024"
    assert month_label((987, 1)) == "January 0987"
    assert format_display_date(date(2024, 3, 1)) == "Mar 1, 2024"


def test_format_currency_beyond_default_precision():
    assert format_currency(Decimal("1e30")) == f"${10**30:,}.00"
    assert format_currency(Decimal("-12345678901234567890123456789.005")) == (
        "-$12,345,678,901,234,567,890,123,456,789.01"
    )
