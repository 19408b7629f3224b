"""Dashboard loader: fetches one wallet's data and hands it to the aggregator."""

import sqlite3
from typing import Optional, Tuple

from models.dashboard import DashboardSnapshot
from models.team import Team
from models.wallet import Wallet
from tools.dashboard import build_snapshot, empty_snapshot
from logger import get_logger

logger = get_logger()


class DataSourceError(Exception):
    """Raised when a collection cannot be read from the data source."""


class DashboardService:
    """Builds dashboard snapshots from the data-source services.

    Args:
        services: Services container providing wallets, categories,
                  transactions, budgets and teams.
        page_size: Maximum number of records fetched per collection.
    """

    def __init__(self, services, page_size: int):
        self.services = services
        self.page_size = page_size

    def load(self, wallet_id: Optional[int] = None) -> DashboardSnapshot:
        """Load the dashboard snapshot for a wallet.

        Args:
            wallet_id: Wallet to display. Defaults to the first wallet by name.

        Returns:
            DashboardSnapshot. On a data-source failure, an empty snapshot
            with load_error set.
        """
        try:
            wallets = self._fetch(
                "wallets", self.services.wallets.find_all, limit=self.page_size
            )
            active_wallet_id = wallet_id
            if active_wallet_id is None and wallets:
                active_wallet_id = wallets[0].id

            if active_wallet_id is None:
                return empty_snapshot(wallets)

            categories = self._fetch(
                "categories",
                self.services.categories.find_by_wallet,
                active_wallet_id,
                limit=self.page_size,
            )
            transactions = self._fetch(
                "transactions",
                self.services.transactions.find_by_wallet,
                active_wallet_id,
                limit=self.page_size,
            )
            budgets = self._fetch(
                "budgets",
                self.services.budgets.find_by_wallet,
                active_wallet_id,
                limit=self.page_size,
            )
        except DataSourceError as e:
            logger.error(f"Dashboard load failed: {e}")
            return empty_snapshot(load_error=str(e))

        wallet = next((w for w in wallets if w.id == active_wallet_id), None)
        team, team_error = self._load_team(wallet)

        logger.debug(
            f"Loaded wallet {active_wallet_id}: {len(categories)} categories, "
            f"{len(transactions)} transactions, {len(budgets)} budgets"
        )

        return build_snapshot(
            wallets,
            active_wallet_id,
            categories,
            transactions,
            budgets,
            team=team,
            team_error=team_error,
        )

    def _fetch(self, collection: str, fetch, *args, **kwargs):
        try:
            return fetch(*args, **kwargs)
        except sqlite3.Error as e:
            raise DataSourceError(f"Unable to list {collection}: {e}") from e

    def _load_team(self, wallet: Optional[Wallet]) -> Tuple[Optional[Team], Optional[str]]:
        """Load the team linked to a wallet.

        A failure here only affects the team section of the dashboard.
        """
        if wallet is None or not wallet.owner_team_id:
            return None, None

        try:
            team = self.services.teams.find(wallet.owner_team_id)
        except sqlite3.Error as e:
            logger.warning(f"Team lookup failed for wallet {wallet.id}: {e}")
            return None, f"Unable to load team: {e}"

        if team is None:
            return None, f"Unable to load team: Team with ID {wallet.owner_team_id} not found"

        return team, None
