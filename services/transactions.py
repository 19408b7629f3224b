"""Transaction service for database operations."""

from typing import List, Optional
from datetime import date
from decimal import Decimal
from models.transaction import Transaction

# SQL Query Constants
_TRANSACTION_SELECT_FIELDS = """id, wallet_id, amount, transaction_type, category_id,
       occurred_at, memo, merchant"""

_TRANSACTION_INSERT_FIELDS = """wallet_id, amount, transaction_type, category_id,
    occurred_at, memo, merchant"""

# Automatically generate placeholders from field count
_TRANSACTION_INSERT_PLACEHOLDERS = (
    f"({', '.join(['?'] * len(_TRANSACTION_INSERT_FIELDS.split(',')))})"
)


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db_manager):
        """Initialize the transaction service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(
        self,
        wallet_id: int,
        transaction_type: str,
        amount: Decimal,
        occurred_at: date,
        category_id: Optional[int] = None,
        memo: Optional[str] = None,
        merchant: Optional[str] = None,
    ) -> Transaction:
        """Record a single transaction.

        Args:
            wallet_id: ID of the wallet the transaction belongs to.
            transaction_type: 'expense' or 'income'.
            amount: Positive amount.
            occurred_at: Date the transaction happened.
            category_id: Optional category ID (None for uncategorised).
            memo: Optional free-text note.
            merchant: Optional merchant name.

        Returns:
            The created Transaction object with id populated.

        Raises:
            sqlite3.IntegrityError: If the amount is not positive or the type is invalid.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                INSERT INTO transactions ({_TRANSACTION_INSERT_FIELDS})
                VALUES {_TRANSACTION_INSERT_PLACEHOLDERS}
                """,
                (
                    wallet_id,
                    float(amount),
                    transaction_type,
                    category_id,
                    occurred_at.isoformat(),
                    memo,
                    merchant,
                ),
            )
            conn.commit()

            return Transaction(
                id=cursor.lastrowid,
                wallet_id=wallet_id,
                amount=amount,
                type=transaction_type,
                occurred_at=occurred_at,
                category_id=category_id,
                memo=memo,
                merchant=merchant,
            )

    def update(self, transaction: Transaction) -> Transaction:
        """Overwrite the editable fields of an existing transaction.

        The transaction's identity and owning wallet never change.

        Args:
            transaction: Transaction carrying the new values.

        Returns:
            The updated Transaction object.

        Raises:
            Exception: If no transaction with that ID exists in the wallet.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                UPDATE transactions
                SET amount = ?, transaction_type = ?, category_id = ?,
                    occurred_at = ?, memo = ?, merchant = ?
                WHERE id = ? AND wallet_id = ?
                """,
                (
                    float(transaction.amount),
                    transaction.type,
                    transaction.category_id,
                    transaction.occurred_at.isoformat(),
                    transaction.memo,
                    transaction.merchant,
                    transaction.id,
                    transaction.wallet_id,
                ),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise Exception(f"Transaction with ID {transaction.id} not found")

        return transaction

    def delete(self, transaction_id: int) -> bool:
        """Delete a transaction by ID.

        Args:
            transaction_id: The transaction ID to delete.

        Returns:
            True if the transaction was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "DELETE FROM transactions WHERE id = ?", (transaction_id,)
            )
            conn.commit()
            return cursor.rowcount > 0

    def find(self, transaction_id: int) -> Optional[Transaction]:
        """Get a single transaction by ID.

        Args:
            transaction_id: The transaction ID.

        Returns:
            Transaction object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_TRANSACTION_SELECT_FIELDS}
                FROM transactions
                WHERE id = ?
                """,
                (transaction_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_transaction(row)
            return None

    def find_by_wallet(
        self,
        wallet_id: int,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: Optional[int] = None,
    ) -> List[Transaction]:
        """Get transactions for a wallet, newest first.

        Args:
            wallet_id: The wallet ID to filter by.
            start_date: Optional inclusive lower bound on occurred_at.
            end_date: Optional inclusive upper bound on occurred_at.
            limit: Optional maximum number of transactions to return.

        Returns:
            List of Transaction objects ordered by occurred_at (newest first).
        """
        query = f"""
            SELECT {_TRANSACTION_SELECT_FIELDS}
            FROM transactions
            WHERE wallet_id = ?
        """
        params = [wallet_id]

        if start_date is not None:
            query += " AND occurred_at >= ?"
            params.append(start_date.isoformat())

        if end_date is not None:
            query += " AND occurred_at <= ?"
            params.append(end_date.isoformat())

        query += " ORDER BY occurred_at DESC, id DESC"

        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            rows = cursor.fetchall()

            return [self._row_to_transaction(row) for row in rows]

    def _row_to_transaction(self, row: tuple) -> Transaction:
        """Convert a database row to a Transaction object."""
        return Transaction(
            id=row[0],
            wallet_id=row[1],
            amount=Decimal(str(row[2])),
            type=row[3],
            category_id=row[4],
            occurred_at=date.fromisoformat(row[5]),
            memo=row[6],
            merchant=row[7],
        )
