from datetime import date
from decimal import Decimal
from itertools import permutations

import pytest

from models.dashboard import BudgetSummary
from models.team import Team
from models.wallet import Wallet
from tools.dashboard import (
    UNKNOWN_CATEGORY_LABEL,
    WHOLE_WALLET_LABEL,
    build_snapshot,
    categorize_transactions,
    compute_totals,
    empty_snapshot,
    index_categories,
    summarize_budget,
    summarize_categories,
)
from tests.helpers import make_budget, make_category, make_transaction


@pytest.fixture
def categories():
    return [
        make_category(1, "Groceries"),
        make_category(2, "Dining"),
        make_category(3, "Salary", type="income"),
    ]


@pytest.fixture
def category_map(categories):
    return index_categories(categories)


@pytest.fixture
def transactions():
    return [
        make_transaction(1, "100", "expense", category_id=1),
        make_transaction(2, "500", "income"),
        make_transaction(3, "30", "expense", category_id=2),
    ]


class TestComputeTotals:
    def test_sums_by_type(self, transactions):
        totals = compute_totals(transactions)

        assert totals.income == Decimal("500")
        assert totals.expenses == Decimal("130")
        assert totals.net == Decimal("370")

    def test_empty(self):
        totals = compute_totals([])

        assert totals.income == Decimal("0")
        assert totals.expenses == Decimal("0")
        assert totals.net == Decimal("0")

    def test_net_negative_when_overspent(self):
        totals = compute_totals(
            [make_transaction(1, "20", "income"), make_transaction(2, "75.50", "expense")]
        )

        assert totals.net == Decimal("-55.50")

    def test_order_independent(self, transactions):
        """Totals are identical for every ordering of the input."""
        expected = compute_totals(transactions)

        for ordering in permutations(transactions):
            totals = compute_totals(ordering)
            assert (totals.income, totals.expenses) == (expected.income, expected.expenses)

    def test_decimal_sums_are_exact(self):
        totals = compute_totals([make_transaction(i, "0.10") for i in range(10)])

        assert totals.expenses == Decimal("1.00")

    def test_uncategorised_and_dangling_still_count(self):
        totals = compute_totals(
            [
                make_transaction(1, "10", category_id=None),
                make_transaction(2, "15", category_id=999),
            ]
        )

        assert totals.expenses == Decimal("25")


class TestSummarizeCategories:
    def test_groups_and_sorts_descending(self, category_map):
        summaries = summarize_categories(
            [
                make_transaction(1, "30", category_id=2),
                make_transaction(2, "100", category_id=1),
                make_transaction(3, "25", category_id=2),
                make_transaction(4, "2000", "income", category_id=3),
            ],
            category_map,
        )

        assert [(s.name, s.total) for s in summaries] == [
            ("Salary", Decimal("2000")),
            ("Groceries", Decimal("100")),
            ("Dining", Decimal("55")),
        ]
        assert summaries[0].type == "income"

    def test_skips_uncategorised_and_unknown(self, category_map):
        summaries = summarize_categories(
            [
                make_transaction(1, "40", category_id=None),
                make_transaction(2, "50", category_id=999),
                make_transaction(3, "5", category_id=1),
            ],
            category_map,
        )

        assert [(s.id, s.total) for s in summaries] == [(1, Decimal("5"))]

    def test_ties_keep_first_seen_order(self, category_map):
        summaries = summarize_categories(
            [
                make_transaction(1, "10", category_id=2),
                make_transaction(2, "10", category_id=1),
            ],
            category_map,
        )

        assert [s.id for s in summaries] == [2, 1]

    def test_totals_match_category_transactions(self, category_map, transactions):
        for summary in summarize_categories(transactions, category_map):
            expected = sum(
                (t.amount for t in transactions if t.category_id == summary.id),
                Decimal("0"),
            )
            assert summary.total == expected

    def test_empty(self, category_map):
        assert summarize_categories([], category_map) == []


class TestSummarizeBudget:
    def test_whole_wallet_budget_counts_all_expenses(self, transactions, category_map):
        summary = summarize_budget(make_budget(1, "150"), transactions, category_map)

        assert summary.label == WHOLE_WALLET_LABEL
        assert summary.spent == Decimal("130")
        assert summary.remaining == Decimal("20")
        assert summary.progress == 87
        assert not summary.is_over_budget

    def test_scoped_budget_counts_only_its_category(self, transactions, category_map):
        summary = summarize_budget(
            make_budget(2, "50", category_id=1), transactions, category_map
        )

        assert summary.label == "Groceries"
        assert summary.spent == Decimal("100")
        assert summary.remaining == Decimal("-50")
        assert summary.progress == 100
        assert summary.is_over_budget

    def test_income_never_counts(self, category_map):
        summary = summarize_budget(
            make_budget(1, "100", category_id=3),
            [make_transaction(1, "5000", "income", category_id=3)],
            category_map,
        )

        assert summary.spent == Decimal("0")
        assert summary.progress == 0

    def test_deleted_category_still_aggregates(self, category_map):
        summary = summarize_budget(
            make_budget(1, "80", category_id=42),
            [
                make_transaction(1, "20", category_id=42),
                make_transaction(2, "7", category_id=1),
            ],
            category_map,
        )

        assert summary.label == UNKNOWN_CATEGORY_LABEL
        assert summary.spent == Decimal("20")
        assert summary.remaining == Decimal("60")

    def test_carries_budget_fields(self, category_map):
        summary = summarize_budget(
            make_budget(9, "10", category_id=2, interval="yearly"), [], category_map
        )

        assert summary.id == 9
        assert summary.interval == "yearly"
        assert summary.limit == Decimal("10")
        assert summary.category_id == 2


class TestBudgetProgress:
    @pytest.mark.parametrize(
        "limit,spent,expected",
        [
            ("100", "0", 0),
            ("100", "49.4", 49),
            ("100", "49.5", 50),
            ("3", "1", 33),
            ("100", "100", 100),
            ("100", "250", 100),
            ("0", "10", 0),
        ],
    )
    def test_progress(self, limit, spent, expected):
        summary = BudgetSummary(
            id=1, label="x", interval="monthly", limit=Decimal(limit), spent=Decimal(spent)
        )

        assert summary.progress == expected

    def test_remaining_plus_spent_equals_limit(self):
        summary = BudgetSummary(
            id=1, label="x", interval="monthly", limit=Decimal("120.40"), spent=Decimal("150.15")
        )

        assert summary.remaining + summary.spent == summary.limit


class TestCategorizeTransactions:
    def test_resolves_names(self, transactions, category_map):
        result = categorize_transactions(transactions, category_map)

        assert [t.category_name for t in result] == ["Groceries", None, "Dining"]
        assert result[0].amount == Decimal("100")
        assert result[0].occurred_at == date(2025, 1, 15)

    def test_unknown_category_has_no_name(self, category_map):
        result = categorize_transactions(
            [make_transaction(1, "5", category_id=999)], category_map
        )

        assert result[0].category_name is None
        assert result[0].category_id == 999


class TestBuildSnapshot:
    def test_full_snapshot(self, categories, transactions):
        wallets = [Wallet(id=1, name="Household", default_currency="EUR")]
        budgets = [make_budget(1, "150"), make_budget(2, "50", category_id=1)]
        team = Team(id=3, name="Family")

        snapshot = build_snapshot(
            wallets, 1, categories, transactions, budgets, team=team
        )

        assert snapshot.active_wallet_id == 1
        assert snapshot.currency == "EUR"
        assert snapshot.totals.net == Decimal("370")
        assert [s.name for s in snapshot.category_summaries] == ["Groceries", "Dining"]
        assert [b.remaining for b in snapshot.budget_summaries] == [
            Decimal("20"),
            Decimal("-50"),
        ]
        assert snapshot.total_budget_limit == Decimal("200")
        assert snapshot.total_budget_remaining == Decimal("-30")
        assert snapshot.team is team
        assert snapshot.team_error is None
        assert len(snapshot.transactions) == 3

    def test_no_active_wallet_gives_zeroed_snapshot(self, categories, transactions):
        wallets = [Wallet(id=1, name="Household", default_currency="EUR")]

        snapshot = build_snapshot(wallets, None, categories, transactions, [make_budget(1, "5")])

        assert snapshot.wallets == wallets
        assert snapshot.transactions == []
        assert snapshot.totals.income == Decimal("0")
        assert snapshot.category_summaries == []
        assert snapshot.budget_summaries == []

    def test_does_not_mutate_inputs(self, categories, transactions):
        before = [t.amount for t in transactions]

        build_snapshot([], 1, categories, transactions, [make_budget(1, "10")])

        assert [t.amount for t in transactions] == before
        assert [c.name for c in categories] == ["Groceries", "Dining", "Salary"]

    def test_team_error_passed_through(self):
        snapshot = build_snapshot([], 1, [], [], [], team_error="Unable to load team: boom")

        assert snapshot.team is None
        assert snapshot.team_error == "Unable to load team: boom"


class TestEmptySnapshot:
    def test_defaults(self):
        snapshot = empty_snapshot()

        assert snapshot.wallets == []
        assert snapshot.active_wallet is None
        assert snapshot.currency == "USD"
        assert snapshot.total_budget_limit == Decimal("0")
        assert snapshot.load_error is None

    def test_load_error(self):
        snapshot = empty_snapshot(load_error="Unable to list wallets: boom")

        assert snapshot.load_error == "Unable to list wallets: boom"
