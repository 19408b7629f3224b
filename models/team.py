"""Team and membership models for wallet collaboration."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

MEMBER_ROLES = ("owner", "member", "viewer")


@dataclass
class Membership:
    """A user's membership in a team.

    Attributes:
        id: Unique identifier (auto-generated).
        team_id: ID of the team.
        user_id: Opaque identity-provider user ID.
        role: One of MEMBER_ROLES.
        confirmed: Whether the user has accepted the membership.
        joined_at: Timestamp when the membership was created.
    """

    id: int
    team_id: int
    user_id: str
    role: str
    confirmed: bool
    joined_at: datetime


@dataclass
class Team:
    """A group of users that can be linked to a wallet."""

    id: int
    name: str
    memberships: List[Membership] = field(default_factory=list)

    @property
    def confirmed_count(self) -> int:
        return sum(1 for m in self.memberships if m.confirmed)
