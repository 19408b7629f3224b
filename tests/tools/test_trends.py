from datetime import date
from decimal import Decimal

from tools.trends import monthly_trend
from tests.helpers import make_transaction


class TestMonthlyTrend:
    def test_zero_fills_months(self):
        points = monthly_trend([], date(2025, 1, 1), date(2025, 3, 1))

        assert [p.month_label for p in points] == ["2025/01", "2025/02", "2025/03"]
        assert all(p.income == Decimal("0") and p.expenses == Decimal("0") for p in points)

    def test_groups_by_month(self):
        transactions = [
            make_transaction(1, "100", "income", occurred_at=date(2025, 1, 3)),
            make_transaction(2, "40", "expense", occurred_at=date(2025, 1, 28)),
            make_transaction(3, "15", "expense", occurred_at=date(2025, 3, 1)),
        ]

        points = monthly_trend(transactions, date(2025, 1, 1), date(2025, 3, 31))

        assert [(p.income, p.expenses, p.net) for p in points] == [
            (Decimal("100"), Decimal("40"), Decimal("60")),
            (Decimal("0"), Decimal("0"), Decimal("0")),
            (Decimal("0"), Decimal("15"), Decimal("-15")),
        ]

    def test_crosses_year_boundary(self):
        points = monthly_trend([], date(2024, 11, 15), date(2025, 2, 2))

        assert [p.month_label for p in points] == [
            "2024/11",
            "2024/12",
            "2025/01",
            "2025/02",
        ]

    def test_ignores_transactions_outside_range(self):
        transactions = [
            make_transaction(1, "100", occurred_at=date(2024, 12, 31)),
            make_transaction(2, "5", occurred_at=date(2025, 1, 1)),
        ]

        points = monthly_trend(transactions, date(2025, 1, 1), date(2025, 1, 1))

        assert len(points) == 1
        assert points[0].expenses == Decimal("5")

    def test_start_after_end_is_empty(self):
        assert monthly_trend([], date(2025, 5, 1), date(2025, 4, 1)) == []
