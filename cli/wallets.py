#!/usr/bin/env python3

from actions import create_wallet_action
from cli.common import format_money, report
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all wallets in the database."""
    wallets = services.wallets.find_all()

    if not wallets:
        logger.info("No wallets found.")
        return

    logger.info("\nWallets:")
    logger.info("=" * 80)
    for wallet in wallets:
        logger.info(f"ID: {wallet.id}")
        logger.info(f"Name: {wallet.name}")
        logger.info(f"Currency: {wallet.default_currency}")
        if wallet.monthly_budget is not None:
            logger.info(
                f"Monthly budget: {format_money(wallet.monthly_budget, wallet.default_currency)}"
            )
        if wallet.owner_team_id:
            logger.info(f"Team ID: {wallet.owner_team_id}")
        logger.info("-" * 80)

    logger.info(f"\nTotal wallets: {len(wallets)}")


def cmd_create(args, services):
    """Create a new wallet."""
    state = create_wallet_action(
        services,
        {
            "name": args.name,
            "default_currency": args.currency or services.config.default_currency,
            "owner_team_id": args.team_id,
            "monthly_budget": args.monthly_budget,
        },
    )
    report(state)


def setup_parser(subparsers):
    """Setup wallets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "wallets",
        help="Manage wallets",
        description="Create and list shared wallets",
    )

    wallets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available wallet commands",
        dest="subcommand",
        required=True,
    )

    # wallets list
    list_parser = wallets_subparsers.add_parser("list", help="List all wallets")
    list_parser.set_defaults(func=cmd_list)

    # wallets create
    create_parser = wallets_subparsers.add_parser("create", help="Create a new wallet")
    create_parser.add_argument("name", help="Wallet name, e.g. 'Household'")
    create_parser.add_argument(
        "--currency", help="Default currency code (defaults to the configured currency)"
    )
    create_parser.add_argument("--team-id", help="Link the wallet to an existing team")
    create_parser.add_argument("--monthly-budget", help="Optional monthly ceiling")
    create_parser.set_defaults(func=cmd_create)
