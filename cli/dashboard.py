#!/usr/bin/env python3

import sys
from cli.common import format_money
from logger import get_logger

logger = get_logger()

RECENT_TRANSACTIONS = 12


def cmd_show(args, services):
    """Show the dashboard for a wallet (defaults to the first wallet)."""
    snapshot = services.dashboard.load(args.wallet)

    if snapshot.load_error:
        logger.error(f"Unable to load dashboard: {snapshot.load_error}")
        return

    if args.wallet is not None and all(w.id != args.wallet for w in snapshot.wallets):
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    wallet = snapshot.active_wallet
    if wallet is None or snapshot.active_wallet_id is None:
        logger.info("No wallets yet. Create one with 'python -m cli wallets create'.")
        return

    currency = snapshot.currency

    def money(amount):
        return format_money(amount, currency)

    logger.info(f"\nDashboard: {wallet.name}")
    logger.info("=" * 80)
    logger.info(f"Income:   {money(snapshot.totals.income)}")
    logger.info(f"Expenses: {money(snapshot.totals.expenses)}")
    logger.info(f"Net:      {money(snapshot.totals.net)}")

    logger.info("\nTop categories:")
    logger.info("-" * 80)
    if not snapshot.category_summaries:
        logger.info("No categorised transactions.")
    for summary in snapshot.category_summaries:
        logger.info(f"{summary.name:<30} {summary.type:<8} {money(summary.total)}")

    logger.info("\nBudgets:")
    logger.info("-" * 80)
    if not snapshot.budget_summaries:
        logger.info("No budgets set.")
    for summary in snapshot.budget_summaries:
        flag = "  OVER" if summary.is_over_budget else ""
        logger.info(
            f"{summary.label:<30} {summary.interval:<10} "
            f"{money(summary.spent)} of {money(summary.limit)} "
            f"({summary.progress}%), remaining {money(summary.remaining)}{flag}"
        )
    if snapshot.budget_summaries:
        logger.info(
            f"Total: {money(snapshot.total_budget_limit)} limit, "
            f"{money(snapshot.total_budget_remaining)} remaining"
        )

    logger.info("\nRecent activity:")
    logger.info("-" * 80)
    if not snapshot.transactions:
        logger.info("No transactions yet.")
    for t in snapshot.transactions[:RECENT_TRANSACTIONS]:
        sign = "+" if t.type == "income" else "-"
        logger.info(
            f"{t.occurred_at.isoformat()}  {sign}{money(t.amount)}  "
            f"{t.category_name or 'Uncategorised'}"
        )

    logger.info("\nTeam:")
    logger.info("-" * 80)
    if snapshot.team_error:
        logger.warning(snapshot.team_error)
    elif snapshot.team is None:
        logger.info("Not shared. Link a team with 'python -m cli teams create'.")
    else:
        team = snapshot.team
        logger.info(
            f"{team.name}: {len(team.memberships)} members ({team.confirmed_count} active)"
        )


def setup_parser(subparsers):
    """Setup dashboard subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "dashboard",
        help="Show the wallet dashboard",
        description="Totals, category rollups, budgets and team for one wallet",
    )

    dashboard_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available dashboard commands",
        dest="subcommand",
        required=True,
    )

    show_parser = dashboard_subparsers.add_parser("show", help="Show the dashboard")
    show_parser.add_argument(
        "--wallet", type=int, help="Wallet ID (defaults to the first wallet by name)"
    )
    show_parser.set_defaults(func=cmd_show)
