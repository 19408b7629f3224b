"""Budget model for spending ceilings."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

BUDGET_INTERVALS = ("monthly", "quarterly", "yearly", "custom")


@dataclass
class Budget:
    """A spending ceiling for a wallet.

    Attributes:
        id: Unique identifier (auto-generated).
        wallet_id: ID of the wallet this budget belongs to.
        limit: Spending ceiling for the interval.
        interval: One of BUDGET_INTERVALS.
        category_id: Category the budget is scoped to, or None for the whole wallet.
        rollover: Whether unspent budget carries into the next interval.
    """

    id: int
    wallet_id: int
    limit: Decimal
    interval: str
    category_id: Optional[int] = None
    rollover: bool = False

    @property
    def is_wallet_wide(self) -> bool:
        return self.category_id is None
