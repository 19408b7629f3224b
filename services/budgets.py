"""Budget service for database operations."""

from decimal import Decimal
from typing import List, Optional
from models.budget import Budget

_BUDGET_SELECT_FIELDS = "id, wallet_id, limit_amount, interval, category_id, rollover"


class BudgetService:
    """Service for managing budgets."""

    def __init__(self, db_manager):
        """Initialize the budget service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_by_wallet(self, wallet_id: int, limit: Optional[int] = None) -> List[Budget]:
        """Get all budgets for a wallet.

        Args:
            wallet_id: The wallet ID to filter by.
            limit: Optional maximum number of budgets to return.

        Returns:
            List of Budget objects, ordered by id.
        """
        query = f"""
            SELECT {_BUDGET_SELECT_FIELDS}
            FROM budgets
            WHERE wallet_id = ?
            ORDER BY id
        """
        params = [wallet_id]
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            rows = cursor.fetchall()

            return [self._row_to_budget(row) for row in rows]

    def find(self, budget_id: int) -> Optional[Budget]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE id = ?",
                (budget_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_budget(row)
            return None

    def create(
        self,
        wallet_id: int,
        limit: Decimal,
        interval: str,
        category_id: Optional[int] = None,
        rollover: bool = False,
    ) -> Budget:
        """Create a new budget.

        Args:
            wallet_id: ID of the wallet the budget applies to.
            limit: Spending ceiling.
            interval: 'monthly', 'quarterly', 'yearly' or 'custom'.
            category_id: Optional category scope; None covers the whole wallet.
            rollover: Whether unspent budget carries over.

        Returns:
            The created Budget object with id populated.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO budgets (wallet_id, limit_amount, interval, category_id, rollover)
                VALUES (?, ?, ?, ?, ?)
                """,
                (wallet_id, float(limit), interval, category_id, int(rollover)),
            )
            conn.commit()

            return Budget(
                id=cursor.lastrowid,
                wallet_id=wallet_id,
                limit=limit,
                interval=interval,
                category_id=category_id,
                rollover=rollover,
            )

    def delete(self, budget_id: int) -> bool:
        """Delete a budget by ID.

        Returns:
            True if the budget was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM budgets WHERE id = ?", (budget_id,))
            conn.commit()
            return cursor.rowcount > 0

    def _row_to_budget(self, row: tuple) -> Budget:
        return Budget(
            id=row[0],
            wallet_id=row[1],
            limit=Decimal(str(row[2])),
            interval=row[3],
            category_id=row[4],
            rollover=bool(row[5]),
        )
