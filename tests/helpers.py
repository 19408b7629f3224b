"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Optional
import sqlite3

from models.budget import Budget
from models.category import Category
from models.transaction import Transaction


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        with open(migration_file, "r") as f:
            conn.executescript(f.read())

    conn.commit()


def make_transaction(
    id: int,
    amount: str,
    type: str = "expense",
    category_id: Optional[int] = None,
    occurred_at: date = date(2025, 1, 15),
    wallet_id: int = 1,
) -> Transaction:
    """Build an in-memory transaction for pure-function tests."""
    return Transaction(
        id=id,
        wallet_id=wallet_id,
        amount=Decimal(amount),
        type=type,
        occurred_at=occurred_at,
        category_id=category_id,
    )


def make_category(id: int, name: str, type: str = "expense", wallet_id: int = 1) -> Category:
    return Category(id=id, wallet_id=wallet_id, name=name, type=type)


def make_budget(
    id: int,
    limit: str,
    category_id: Optional[int] = None,
    interval: str = "monthly",
    wallet_id: int = 1,
) -> Budget:
    return Budget(
        id=id,
        wallet_id=wallet_id,
        limit=Decimal(limit),
        interval=interval,
        category_id=category_id,
    )
