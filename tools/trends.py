"""Monthly income/expense trend."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from dateutil.relativedelta import relativedelta

from models.transaction import Transaction


@dataclass
class MonthlyTrendPoint:
    month_label: str  # "YYYY/MM"
    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


def monthly_trend(
    transactions: Iterable[Transaction], start_month: date, end_month: date
) -> List[MonthlyTrendPoint]:
    """Summarize income and expenses per calendar month.

    Args:
        transactions: Transactions to summarize; those outside the range are ignored.
        start_month: Start of period (day component ignored).
        end_month: End of period (day component ignored), inclusive.

    Returns:
        One MonthlyTrendPoint per month in the range, oldest first. Months
        without transactions are zero-filled. Empty if start is after end.
    """
    points: Dict[Tuple[int, int], MonthlyTrendPoint] = {}

    current = start_month.replace(day=1)
    last = end_month.replace(day=1)
    while current <= last:
        points[(current.year, current.month)] = MonthlyTrendPoint(
            month_label=f"{current.year:04d}/{current.month:02d}"
        )
        current += relativedelta(months=1)

    for transaction in transactions:
        point = points.get((transaction.occurred_at.year, transaction.occurred_at.month))
        if point is None:
            continue
        if transaction.type == "income":
            point.income += transaction.amount
        elif transaction.type == "expense":
            point.expenses += transaction.amount

    return list(points.values())
