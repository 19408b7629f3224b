import argparse
import logging
from datetime import date
from decimal import Decimal

import pytest

from cli.dashboard import cmd_show


class TestDashboardShow:
    def test_unknown_wallet_exits(self, services, wallet, caplog):
        with caplog.at_level(logging.INFO, logger="tally"):
            with pytest.raises(SystemExit) as excinfo:
                cmd_show(argparse.Namespace(wallet=999), services)

        assert excinfo.value.code == 1
        assert "Wallet with ID 999 not found." in caplog.text
        assert "Household" not in caplog.text

    def test_shows_requested_wallet(self, services, wallet, caplog):
        services.wallets.create("Apartment", "EUR")
        services.transactions.create(wallet.id, "income", Decimal("1250"), date(2025, 1, 5))

        with caplog.at_level(logging.INFO, logger="tally"):
            cmd_show(argparse.Namespace(wallet=wallet.id), services)

        assert "Dashboard: Household" in caplog.text
        assert "Income:   USD 1,250.00" in caplog.text

    def test_defaults_to_first_wallet(self, services, wallet, caplog):
        with caplog.at_level(logging.INFO, logger="tally"):
            cmd_show(argparse.Namespace(wallet=None), services)

        assert "Dashboard: Household" in caplog.text
