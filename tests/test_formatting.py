"""Tests for currency and date formatting."""

from datetime import date
from decimal import Decimal

import pytest

from loan_ledger.engine import format_currency, format_date, format_date_relative


class TestFormatCurrency:
    """Tests for format_currency()."""

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (Decimal("0"), "₹0"),
            (Decimal("999"), "₹999"),
            (Decimal("1000"), "₹1,000"),
            (Decimal("100000"), "₹1,00,000"),
            (Decimal("12345678"), "₹1,23,45,678"),
            (Decimal("1234.5"), "₹1,234.5"),
            (Decimal("16.6666"), "₹16.67"),
            (Decimal("10.00"), "₹10"),
            (Decimal("-2500"), "-₹2,500"),
            (1500, "₹1,500"),
            (99.5, "₹99.5"),
        ],
    )
    def test_format(self, amount, expected: str) -> None:
        assert format_currency(amount) == expected


class TestFormatDate:
    """Tests for format_date()."""

    def test_datetime(self, day) -> None:
        assert format_date(day(0)) == "01 Jan 2024"

    def test_date(self) -> None:
        assert format_date(date(2024, 12, 25)) == "25 Dec 2024"


class TestFormatDateRelative:
    """Tests for format_date_relative()."""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (0, "Today"),
            (1, "Tomorrow"),
            (-1, "Yesterday"),
            (3, "In 3 days"),
            (7, "In 7 days"),
            (-7, "7 days ago"),
            (8, "15 Jan 2024"),
            (-8, "30 Dec 2023"),
        ],
    )
    def test_relative(self, offset: int, expected: str, day) -> None:
        now = day(6)
        assert format_date_relative(day(6 + offset), now) == expected

    def test_time_of_day_ignored(self, day) -> None:
        assert format_date_relative(day(6, hour=23), day(6, hour=1)) == "Today"
