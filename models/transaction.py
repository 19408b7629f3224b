from dataclasses import dataclass, fields
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class Transaction:
    id: int
    wallet_id: int
    amount: Decimal  # always positive, direction comes from type
    type: str  # 'income' or 'expense'
    occurred_at: date
    category_id: Optional[int] = None  # None means uncategorised
    memo: Optional[str] = None
    merchant: Optional[str] = None


@dataclass
class CategorizedTransaction(Transaction):
    """A transaction with its category name resolved for display."""

    category_name: Optional[str] = None

    @classmethod
    def from_transaction(
        cls, transaction: Transaction, category_name: Optional[str]
    ) -> "CategorizedTransaction":
        values = {f.name: getattr(transaction, f.name) for f in fields(Transaction)}
        return cls(**values, category_name=category_name)
