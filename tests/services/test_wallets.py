from decimal import Decimal

import pytest


class TestWalletService:
    """Tests for WalletService."""

    def test_create_wallet(self, services):
        """Test creating a wallet with only the required fields."""
        wallet = services.wallets.create("Household", "EUR")

        assert wallet.id is not None
        assert wallet.id > 0
        assert wallet.name == "Household"
        assert wallet.default_currency == "EUR"
        assert wallet.owner_team_id is None
        assert wallet.monthly_budget is None

    def test_create_wallet_with_monthly_budget(self, services):
        """Test that the monthly budget round-trips as a Decimal."""
        wallet = services.wallets.create("Trip", "USD", monthly_budget=Decimal("1500.50"))

        found = services.wallets.find(wallet.id)

        assert found.monthly_budget == Decimal("1500.50")

    def test_find_not_found(self, services):
        """Test finding a non-existent wallet returns None."""
        assert services.wallets.find(9999) is None

    def test_find_all_empty(self, services):
        """Test listing wallets on an empty database."""
        assert services.wallets.find_all() == []

    def test_find_all_ordered_by_name(self, services):
        """Test wallets are listed alphabetically."""
        services.wallets.create("Zoo fund", "USD")
        services.wallets.create("Apartment", "USD")
        services.wallets.create("Moving", "USD")

        names = [w.name for w in services.wallets.find_all()]

        assert names == ["Apartment", "Moving", "Zoo fund"]

    def test_find_all_respects_limit(self, services):
        """Test the page-size cap on wallet listing."""
        for i in range(5):
            services.wallets.create(f"Wallet {i}", "USD")

        assert len(services.wallets.find_all(limit=3)) == 3

    def test_link_team(self, services):
        """Test linking a wallet to a team."""
        wallet = services.wallets.create("Household", "USD")
        team = services.teams.create("Family")

        updated = services.wallets.link_team(wallet.id, team.id)

        assert updated.owner_team_id == team.id
        assert services.wallets.find(wallet.id).owner_team_id == team.id

    def test_link_team_missing_wallet_raises(self, services):
        """Test linking a team to a wallet that doesn't exist."""
        with pytest.raises(Exception, match="Wallet with ID 42 not found"):
            services.wallets.link_team(42, 1)
