"""Category service for database operations."""

from typing import List, Optional
from models.category import Category

_CATEGORY_SELECT_FIELDS = "id, wallet_id, name, type, color, icon"


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_by_wallet(
        self, wallet_id: int, limit: Optional[int] = None
    ) -> List[Category]:
        """Get all categories belonging to a wallet.

        Args:
            wallet_id: The wallet ID to filter by.
            limit: Optional maximum number of categories to return.

        Returns:
            List of Category objects, ordered by name.
        """
        query = f"""
            SELECT {_CATEGORY_SELECT_FIELDS}
            FROM categories
            WHERE wallet_id = ?
            ORDER BY name
        """
        params = [wallet_id]
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            rows = cursor.fetchall()

            return [self._row_to_category(row) for row in rows]

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories WHERE id = ?",
                (category_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_category(row)
            return None

    def find_by_name(self, wallet_id: int, name: str) -> Optional[Category]:
        """Get a wallet's category by name.

        Args:
            wallet_id: The wallet the category belongs to.
            name: The category name to find (case-sensitive).

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_CATEGORY_SELECT_FIELDS}
                FROM categories
                WHERE wallet_id = ? AND name = ?
                """,
                (wallet_id, name),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_category(row)
            return None

    def create(
        self,
        wallet_id: int,
        name: str,
        category_type: str,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> Category:
        """Create a new category.

        Args:
            wallet_id: ID of the wallet that owns the category.
            name: Category name (unique per wallet).
            category_type: 'expense' or 'income'.
            color: Optional hex colour.
            icon: Optional icon key.

        Returns:
            The created Category object with id populated.

        Raises:
            sqlite3.IntegrityError: If the name is already used in this wallet.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO categories (wallet_id, name, type, color, icon)
                VALUES (?, ?, ?, ?, ?)
                """,
                (wallet_id, name, category_type, color, icon),
            )
            conn.commit()

            return Category(
                id=cursor.lastrowid,
                wallet_id=wallet_id,
                name=name,
                type=category_type,
                color=color,
                icon=icon,
            )

    def delete(self, category_id: int) -> bool:
        """Delete a category by ID.

        Transactions and budgets referencing the category keep the ID.

        Args:
            category_id: The category ID to delete.

        Returns:
            True if category was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
            conn.commit()
            return cursor.rowcount > 0

    def _row_to_category(self, row: tuple) -> Category:
        return Category(
            id=row[0],
            wallet_id=row[1],
            name=row[2],
            type=row[3],
            color=row[4],
            icon=row[5],
        )
