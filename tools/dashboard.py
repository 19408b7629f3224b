"""Dashboard aggregation over already-fetched wallet data.

Everything here is pure: no database access, no logging, no raised domain
errors. Amounts are positive Decimal magnitudes tagged by transaction type.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from models.budget import Budget
from models.category import Category
from models.dashboard import (
    BudgetSummary,
    CategorySummary,
    DashboardSnapshot,
    DashboardTotals,
)
from models.team import Team
from models.transaction import CategorizedTransaction, Transaction
from models.wallet import Wallet

WHOLE_WALLET_LABEL = "Whole wallet"
UNKNOWN_CATEGORY_LABEL = "Unknown category"


def index_categories(categories: Iterable[Category]) -> Mapping[int, Category]:
    """Build a read-only category lookup keyed by category ID."""
    return MappingProxyType({category.id: category for category in categories})


def categorize_transactions(
    transactions: Iterable[Transaction], category_map: Mapping[int, Category]
) -> List[CategorizedTransaction]:
    """Attach the resolved category name to each transaction.

    Uncategorised transactions and transactions pointing at a category that
    no longer exists get category_name=None.
    """
    result = []
    for transaction in transactions:
        category = (
            category_map.get(transaction.category_id)
            if transaction.category_id is not None
            else None
        )
        result.append(
            CategorizedTransaction.from_transaction(
                transaction, category.name if category else None
            )
        )
    return result


def compute_totals(transactions: Iterable[Transaction]) -> DashboardTotals:
    """Sum income and expenses in a single pass.

    Returns:
        DashboardTotals; net is derived as income - expenses.
    """
    income = Decimal("0")
    expenses = Decimal("0")

    for transaction in transactions:
        if transaction.type == "income":
            income += transaction.amount
        elif transaction.type == "expense":
            expenses += transaction.amount

    return DashboardTotals(income=income, expenses=expenses)


def summarize_categories(
    transactions: Iterable[Transaction], category_map: Mapping[int, Category]
) -> List[CategorySummary]:
    """Roll transaction amounts up per category.

    Transactions without a category, or whose category cannot be resolved,
    are skipped.

    Returns:
        CategorySummary list sorted by total, largest first. Ties keep the
        order in which the categories were first encountered.
    """
    summaries: Dict[int, CategorySummary] = {}

    for transaction in transactions:
        if transaction.category_id is None:
            continue
        category = category_map.get(transaction.category_id)
        if category is None:
            continue

        summary = summaries.get(category.id)
        if summary is None:
            summary = CategorySummary(id=category.id, name=category.name, type=category.type)
            summaries[category.id] = summary
        summary.total += transaction.amount

    return sorted(summaries.values(), key=lambda s: s.total, reverse=True)


def summarize_budget(
    budget: Budget,
    transactions: Iterable[Transaction],
    category_map: Mapping[int, Category],
) -> BudgetSummary:
    """Compute spend against a single budget.

    Only expenses count. A wallet-wide budget counts every expense; a scoped
    budget counts expenses in its category, even when that category has
    since been deleted.
    """
    spent = Decimal("0")
    for transaction in transactions:
        if transaction.type != "expense":
            continue
        if budget.category_id is not None and transaction.category_id != budget.category_id:
            continue
        spent += transaction.amount

    if budget.category_id is None:
        label = WHOLE_WALLET_LABEL
    else:
        category = category_map.get(budget.category_id)
        label = category.name if category else UNKNOWN_CATEGORY_LABEL

    return BudgetSummary(
        id=budget.id,
        label=label,
        interval=budget.interval,
        limit=budget.limit,
        spent=spent,
        category_id=budget.category_id,
    )


def summarize_budgets(
    budgets: Iterable[Budget],
    transactions: Sequence[Transaction],
    category_map: Mapping[int, Category],
) -> List[BudgetSummary]:
    return [summarize_budget(b, transactions, category_map) for b in budgets]


def empty_snapshot(
    wallets: Sequence[Wallet] = (), load_error: Optional[str] = None
) -> DashboardSnapshot:
    """A zeroed snapshot, used when no wallet is selected or loading failed."""
    return DashboardSnapshot(wallets=list(wallets), load_error=load_error)


def build_snapshot(
    wallets: Sequence[Wallet],
    active_wallet_id: Optional[int],
    categories: Sequence[Category],
    transactions: Sequence[Transaction],
    budgets: Sequence[Budget],
    team: Optional[Team] = None,
    team_error: Optional[str] = None,
) -> DashboardSnapshot:
    """Aggregate one wallet's data into a dashboard snapshot.

    Args:
        wallets: All wallets visible to the user.
        active_wallet_id: The wallet being displayed, or None.
        categories: The wallet's categories.
        transactions: The wallet's transactions (already capped upstream).
        budgets: The wallet's budgets.
        team: Team linked to the wallet, with memberships, if any.
        team_error: Message describing a failed team lookup, if any.

    Returns:
        DashboardSnapshot. A zeroed snapshot when active_wallet_id is None.
    """
    if active_wallet_id is None:
        return empty_snapshot(wallets)

    category_map = index_categories(categories)

    return DashboardSnapshot(
        wallets=list(wallets),
        active_wallet_id=active_wallet_id,
        categories=list(categories),
        transactions=categorize_transactions(transactions, category_map),
        totals=compute_totals(transactions),
        category_summaries=summarize_categories(transactions, category_map),
        budgets=list(budgets),
        budget_summaries=summarize_budgets(budgets, transactions, category_map),
        team=team,
        team_error=team_error,
    )
