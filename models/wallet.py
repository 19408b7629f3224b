from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Wallet:
    id: int
    name: str
    default_currency: str  # ISO code, e.g. "USD"
    owner_team_id: Optional[int] = None
    monthly_budget: Optional[Decimal] = None
