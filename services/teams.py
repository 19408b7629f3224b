"""Team service for wallet collaboration."""

from typing import List, Optional
from datetime import datetime
from models.team import Membership, Team
from models.wallet import Wallet
from logger import get_logger

logger = get_logger()

_MEMBERSHIP_SELECT_FIELDS = "id, team_id, user_id, role, confirmed, joined_at"


class TeamService:
    """Service for managing teams, memberships and their link to wallets."""

    def __init__(self, db_manager, wallets):
        """Initialize the team service.

        Args:
            db_manager: Database manager instance for database operations.
            wallets: WalletService used to link teams to wallets.
        """
        self.db_manager = db_manager
        self.wallets = wallets

    def create(self, name: str) -> Team:
        """Create a new team with no members.

        Args:
            name: Display name of the team.

        Returns:
            The created Team object with id populated.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("INSERT INTO teams (name) VALUES (?)", (name,))
            conn.commit()

            return Team(id=cursor.lastrowid, name=name)

    def find(self, team_id: int) -> Optional[Team]:
        """Get a team by ID with its memberships loaded.

        Args:
            team_id: The team ID to find.

        Returns:
            Team object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name FROM teams WHERE id = ?", (team_id,)
            )
            row = cursor.fetchone()

        if not row:
            return None

        return Team(id=row[0], name=row[1], memberships=self.list_memberships(row[0]))

    def list_memberships(self, team_id: int) -> List[Membership]:
        """Get all memberships of a team.

        Args:
            team_id: The team ID to filter by.

        Returns:
            List of Membership objects ordered by join time.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_MEMBERSHIP_SELECT_FIELDS}
                FROM memberships
                WHERE team_id = ?
                ORDER BY joined_at, id
                """,
                (team_id,),
            )
            rows = cursor.fetchall()

            return [self._row_to_membership(row) for row in rows]

    def create_membership(
        self, team_id: int, user_id: str, role: str, confirmed: bool = True
    ) -> Membership:
        """Add a user to a team.

        Args:
            team_id: The team to join.
            user_id: Identity-provider user ID.
            role: 'owner', 'member' or 'viewer'.
            confirmed: Whether the membership is active immediately.

        Returns:
            The created Membership object.

        Raises:
            sqlite3.IntegrityError: If the user is already a member of the team.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO memberships (team_id, user_id, role, confirmed)
                VALUES (?, ?, ?, ?)
                """,
                (team_id, user_id, role, int(confirmed)),
            )
            conn.commit()

            # Fetch the created record to get the joined_at timestamp
            cursor = conn.execute(
                f"SELECT {_MEMBERSHIP_SELECT_FIELDS} FROM memberships WHERE id = ?",
                (cursor.lastrowid,),
            )
            return self._row_to_membership(cursor.fetchone())

    def create_for_wallet(self, wallet_id: int, team_name: str) -> Team:
        """Create a new team and link it to a wallet.

        Args:
            wallet_id: The wallet to link.
            team_name: Name of the new team.

        Returns:
            The created Team.
        """
        team = self.create(team_name)
        self.wallets.link_team(wallet_id, team.id)
        logger.info(f"Created team {team.id} for wallet {wallet_id}")
        return team

    def attach_to_wallet(self, wallet_id: int, team_id: int) -> Wallet:
        """Link an existing team to a wallet.

        Args:
            wallet_id: The wallet to link.
            team_id: The existing team ID.

        Returns:
            The updated Wallet.

        Raises:
            Exception: If the team does not exist.
        """
        if self.find(team_id) is None:
            raise Exception(f"Unable to load team: Team with ID {team_id} not found")

        return self.wallets.link_team(wallet_id, team_id)

    def add_member_to_wallet(self, wallet_id: int, user_id: str, role: str) -> Membership:
        """Add a user to the team linked to a wallet.

        Args:
            wallet_id: The wallet whose team the user joins.
            user_id: Identity-provider user ID.
            role: 'owner', 'member' or 'viewer'.

        Returns:
            The created Membership.

        Raises:
            Exception: If the wallet does not exist.
            ValueError: If the wallet has no linked team.
        """
        wallet = self.wallets.find(wallet_id)
        if wallet is None:
            raise Exception(f"Wallet with ID {wallet_id} not found")

        if not wallet.owner_team_id:
            raise ValueError("Link a team to this wallet before adding members.")

        return self.create_membership(wallet.owner_team_id, user_id, role)

    def _row_to_membership(self, row: tuple) -> Membership:
        return Membership(
            id=row[0],
            team_id=row[1],
            user_id=row[2],
            role=row[3],
            confirmed=bool(row[4]),
            joined_at=datetime.fromisoformat(row[5]),
        )
