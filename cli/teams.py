#!/usr/bin/env python3

import sys
from actions import add_team_member_action, attach_team_action, create_wallet_team_action
from cli.common import report
from logger import get_logger

logger = get_logger()


def cmd_create(args, services):
    """Create a team and link it to a wallet."""
    report(
        create_wallet_team_action(
            services, {"wallet_id": args.wallet, "team_name": args.name}
        )
    )


def cmd_attach(args, services):
    """Link an existing team to a wallet."""
    report(attach_team_action(services, {"wallet_id": args.wallet, "team_id": args.team_id}))


def cmd_add_member(args, services):
    """Add a user to the team linked to a wallet."""
    report(
        add_team_member_action(
            services,
            {"wallet_id": args.wallet, "user_id": args.user_id, "role": args.role},
        )
    )


def cmd_members(args, services):
    """List the members of the team linked to a wallet."""
    wallet = services.wallets.find(args.wallet)
    if wallet is None:
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    if not wallet.owner_team_id:
        logger.info(f"Wallet '{wallet.name}' is not linked to a team.")
        return

    team = services.teams.find(wallet.owner_team_id)
    if team is None:
        logger.error(f"Team with ID {wallet.owner_team_id} not found.")
        sys.exit(1)

    logger.info(f"\nTeam '{team.name}' (ID: {team.id}):")
    logger.info("=" * 80)
    if not team.memberships:
        logger.info("No members yet.")
    for member in team.memberships:
        status = "active" if member.confirmed else "invited"
        logger.info(f"{member.user_id}  {member.role}  {status}  since {member.joined_at:%Y-%m-%d}")

    logger.info(f"\nMembers: {len(team.memberships)} ({team.confirmed_count} active)")


def setup_parser(subparsers):
    """Setup teams subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "teams",
        help="Manage wallet teams",
        description="Link teams to wallets and manage their members",
    )

    teams_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available team commands",
        dest="subcommand",
        required=True,
    )

    # teams create
    create_parser = teams_subparsers.add_parser(
        "create", help="Create a team and link it to a wallet"
    )
    create_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    create_parser.add_argument("name", help="Team name")
    create_parser.set_defaults(func=cmd_create)

    # teams attach
    attach_parser = teams_subparsers.add_parser(
        "attach", help="Link an existing team to a wallet"
    )
    attach_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    attach_parser.add_argument("team_id", help="Existing team ID")
    attach_parser.set_defaults(func=cmd_attach)

    # teams add-member
    member_parser = teams_subparsers.add_parser(
        "add-member", help="Add a user to a wallet's team"
    )
    member_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    member_parser.add_argument("user_id", help="User ID")
    member_parser.add_argument(
        "--role", choices=["owner", "member", "viewer"], default="member", help="Member role"
    )
    member_parser.set_defaults(func=cmd_add_member)

    # teams members
    members_parser = teams_subparsers.add_parser(
        "members", help="List a wallet's team members"
    )
    members_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    members_parser.set_defaults(func=cmd_members)
