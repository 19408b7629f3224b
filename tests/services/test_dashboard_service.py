from datetime import date
from decimal import Decimal
import sqlite3

from services.dashboard import DashboardService


class TestDashboardService:
    """Tests for DashboardService.load."""

    def test_load_without_wallets(self, services):
        snapshot = services.dashboard.load()

        assert snapshot.wallets == []
        assert snapshot.active_wallet_id is None
        assert snapshot.totals.net == Decimal("0")
        assert snapshot.load_error is None

    def test_load_defaults_to_first_wallet_by_name(self, services):
        services.wallets.create("Zoo fund", "USD")
        first = services.wallets.create("Apartment", "EUR")

        snapshot = services.dashboard.load()

        assert snapshot.active_wallet_id == first.id
        assert snapshot.currency == "EUR"
        assert len(snapshot.wallets) == 2

    def test_load_aggregates_wallet(self, services, wallet):
        groceries = services.categories.create(wallet.id, "Groceries", "expense")
        services.transactions.create(
            wallet.id, "expense", Decimal("100"), date(2025, 1, 5), category_id=groceries.id
        )
        services.transactions.create(wallet.id, "income", Decimal("500"), date(2025, 1, 6))
        services.budgets.create(wallet.id, Decimal("150"), "monthly")

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.totals.income == Decimal("500")
        assert snapshot.totals.expenses == Decimal("100")
        assert snapshot.totals.net == Decimal("400")
        assert [(s.name, s.total) for s in snapshot.category_summaries] == [
            ("Groceries", Decimal("100"))
        ]
        assert snapshot.budget_summaries[0].remaining == Decimal("50")
        assert snapshot.transactions[1].category_name == "Groceries"

    def test_load_ignores_other_wallets(self, services, wallet):
        other = services.wallets.create("Other", "USD")
        services.transactions.create(other.id, "expense", Decimal("99"), date(2025, 1, 5))

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.transactions == []
        assert snapshot.totals.expenses == Decimal("0")

    def test_load_respects_page_size(self, services, wallet):
        for day in range(1, 6):
            services.transactions.create(
                wallet.id, "expense", Decimal("10"), date(2025, 1, day)
            )
        dashboard = DashboardService(services, page_size=3)

        snapshot = dashboard.load(wallet.id)

        assert len(snapshot.transactions) == 3
        assert snapshot.totals.expenses == Decimal("30")

    def test_load_includes_team(self, services, wallet):
        team = services.teams.create_for_wallet(wallet.id, "Family")
        services.teams.create_membership(team.id, "user_a", "owner")

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.team.id == team.id
        assert snapshot.team.confirmed_count == 1
        assert snapshot.team_error is None

    def test_load_reports_missing_team(self, services, wallet):
        services.wallets.link_team(wallet.id, 404)

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.team is None
        assert snapshot.team_error == "Unable to load team: Team with ID 404 not found"
        assert snapshot.load_error is None

    def test_load_team_failure_keeps_rest_of_dashboard(self, services, wallet, monkeypatch):
        services.transactions.create(wallet.id, "income", Decimal("10"), date(2025, 1, 1))
        services.wallets.link_team(wallet.id, 1)

        def broken_find(team_id):
            raise sqlite3.OperationalError("no such table: teams")

        monkeypatch.setattr(services.teams, "find", broken_find)

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.team_error == "Unable to load team: no such table: teams"
        assert snapshot.totals.income == Decimal("10")

    def test_load_data_source_failure_returns_empty_snapshot(
        self, services, wallet, monkeypatch
    ):
        def broken_find_by_wallet(wallet_id, **kwargs):
            raise sqlite3.OperationalError("disk I/O error")

        monkeypatch.setattr(services.transactions, "find_by_wallet", broken_find_by_wallet)

        snapshot = services.dashboard.load(wallet.id)

        assert snapshot.load_error == "Unable to list transactions: disk I/O error"
        assert snapshot.wallets == []
        assert snapshot.totals.income == Decimal("0")
        assert snapshot.budget_summaries == []
