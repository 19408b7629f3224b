"""Wallet service for database operations."""

from decimal import Decimal
from typing import List, Optional
from models.wallet import Wallet

_WALLET_SELECT_FIELDS = "id, name, default_currency, owner_team_id, monthly_budget"


class WalletService:
    """Service for managing wallets."""

    def __init__(self, db_manager):
        """Initialize the wallet service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self, limit: Optional[int] = None) -> List[Wallet]:
        """Get all wallets from the database.

        Args:
            limit: Optional maximum number of wallets to return.

        Returns:
            List of Wallet objects, ordered by name.
        """
        query = f"SELECT {_WALLET_SELECT_FIELDS} FROM wallets ORDER BY name, id"
        params = []
        if limit is not None:
            query += " LIMIT ?"
            params.append(limit)

        with self.db_manager.connect() as conn:
            cursor = conn.execute(query, params)
            rows = cursor.fetchall()

            return [self._row_to_wallet(row) for row in rows]

    def find(self, wallet_id: int) -> Optional[Wallet]:
        """Get a single wallet by ID.

        Args:
            wallet_id: The wallet ID to find.

        Returns:
            Wallet object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_WALLET_SELECT_FIELDS} FROM wallets WHERE id = ?",
                (wallet_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_wallet(row)
            return None

    def create(
        self,
        name: str,
        default_currency: str,
        owner_team_id: Optional[int] = None,
        monthly_budget: Optional[Decimal] = None,
    ) -> Wallet:
        """Create a new wallet.

        Args:
            name: Wallet name.
            default_currency: Currency code used for display, e.g. "EUR".
            owner_team_id: Optional team to link the wallet to.
            monthly_budget: Optional monthly spending ceiling.

        Returns:
            The created Wallet object with id populated.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO wallets (name, default_currency, owner_team_id, monthly_budget)
                VALUES (?, ?, ?, ?)
                """,
                (
                    name,
                    default_currency,
                    owner_team_id,
                    float(monthly_budget) if monthly_budget is not None else None,
                ),
            )
            conn.commit()

            return Wallet(
                id=cursor.lastrowid,
                name=name,
                default_currency=default_currency,
                owner_team_id=owner_team_id,
                monthly_budget=monthly_budget,
            )

    def link_team(self, wallet_id: int, team_id: int) -> Wallet:
        """Link a wallet to a team.

        Team linkage is the only mutable part of a wallet.

        Args:
            wallet_id: The wallet to update.
            team_id: The team that will own the wallet.

        Returns:
            The updated Wallet object.

        Raises:
            Exception: If the wallet does not exist.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "UPDATE wallets SET owner_team_id = ? WHERE id = ?",
                (team_id, wallet_id),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise Exception(f"Wallet with ID {wallet_id} not found")

        return self.find(wallet_id)

    def _row_to_wallet(self, row: tuple) -> Wallet:
        """Convert a database row to a Wallet object."""
        return Wallet(
            id=row[0],
            name=row[1],
            default_currency=row[2],
            owner_team_id=row[3],
            monthly_budget=Decimal(str(row[4])) if row[4] is not None else None,
        )
