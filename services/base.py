"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject mock services for testing.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, config is
                    only used for non-database settings.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.wallets import WalletService
        from services.categories import CategoryService
        from services.transactions import TransactionService
        from services.budgets import BudgetService
        from services.teams import TeamService
        from services.dashboard import DashboardService

        self.wallets = WalletService(self.db_manager)
        self.categories = CategoryService(self.db_manager)
        self.transactions = TransactionService(self.db_manager)
        self.budgets = BudgetService(self.db_manager)
        self.teams = TeamService(self.db_manager, self.wallets)
        self.dashboard = DashboardService(self, page_size=config.page_size)
