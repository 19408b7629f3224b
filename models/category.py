"""Category model for labelling wallet transactions."""

from dataclasses import dataclass
from typing import Optional

CATEGORY_TYPES = ("expense", "income")


@dataclass
class Category:
    """Represents a user-defined category within a wallet.

    Attributes:
        id: Unique identifier (auto-generated).
        wallet_id: ID of the wallet that owns this category.
        name: Category name (unique per wallet).
        type: Either 'expense' or 'income'.
        color: Optional display colour as a hex string, e.g. "#22c55e".
        icon: Optional icon key, e.g. "groceries".
    """

    id: int
    wallet_id: int
    name: str
    type: str
    color: Optional[str] = None
    icon: Optional[str] = None
