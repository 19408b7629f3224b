"""Derived dashboard records. None of these are persisted."""

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from models.budget import Budget
from models.category import Category
from models.team import Team
from models.transaction import CategorizedTransaction
from models.wallet import Wallet

FALLBACK_CURRENCY = "USD"


@dataclass
class DashboardTotals:
    """Running income and expense totals for a wallet.

    Expenses are a positive magnitude; net is always derived.
    """

    income: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")

    @property
    def net(self) -> Decimal:
        return self.income - self.expenses


@dataclass
class CategorySummary:
    id: int
    name: str
    type: str
    total: Decimal = Decimal("0")


@dataclass
class BudgetSummary:
    """Spend against one budget.

    Attributes:
        id: Budget ID.
        label: Category name, or a fixed label for wallet-wide budgets.
        interval: Budget interval.
        limit: Budget ceiling.
        spent: Sum of matching expense transactions.
        category_id: Scoped category, None for the whole wallet.
    """

    id: int
    label: str
    interval: str
    limit: Decimal
    spent: Decimal = Decimal("0")
    category_id: Optional[int] = None

    @property
    def remaining(self) -> Decimal:
        # Negative when over budget
        return self.limit - self.spent

    @property
    def progress(self) -> int:
        """Percentage of the limit used, capped at 100."""
        if self.limit <= 0:
            return 0
        used = (self.spent / self.limit * 100).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        return min(100, int(used))

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.limit


@dataclass
class DashboardSnapshot:
    """Everything needed to render one dashboard view for one wallet."""

    wallets: List[Wallet] = field(default_factory=list)
    active_wallet_id: Optional[int] = None
    categories: List[Category] = field(default_factory=list)
    transactions: List[CategorizedTransaction] = field(default_factory=list)
    totals: DashboardTotals = field(default_factory=DashboardTotals)
    category_summaries: List[CategorySummary] = field(default_factory=list)
    budgets: List[Budget] = field(default_factory=list)
    budget_summaries: List[BudgetSummary] = field(default_factory=list)
    team: Optional[Team] = None
    team_error: Optional[str] = None
    load_error: Optional[str] = None

    @property
    def active_wallet(self) -> Optional[Wallet]:
        for wallet in self.wallets:
            if wallet.id == self.active_wallet_id:
                return wallet
        return self.wallets[0] if self.wallets else None

    @property
    def currency(self) -> str:
        wallet = self.active_wallet
        return wallet.default_currency if wallet else FALLBACK_CURRENCY

    @property
    def total_budget_limit(self) -> Decimal:
        return sum((b.limit for b in self.budget_summaries), Decimal("0"))

    @property
    def total_budget_remaining(self) -> Decimal:
        return sum((b.remaining for b in self.budget_summaries), Decimal("0"))
