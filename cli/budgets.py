#!/usr/bin/env python3

import sys
from actions import create_budget_action
from cli.common import format_money, report
from tools.dashboard import index_categories, summarize_budgets
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List a wallet's budgets with current spend."""
    wallet = services.wallets.find(args.wallet)
    if wallet is None:
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    budgets = services.budgets.find_by_wallet(wallet.id)
    if not budgets:
        logger.info("No budgets found.")
        return

    category_map = index_categories(services.categories.find_by_wallet(wallet.id))
    transactions = services.transactions.find_by_wallet(wallet.id)
    currency = wallet.default_currency

    logger.info(f"\nBudgets in {wallet.name}:")
    logger.info("=" * 80)
    for budget, summary in zip(budgets, summarize_budgets(budgets, transactions, category_map)):
        logger.info(f"ID: {summary.id}")
        logger.info(f"Scope: {summary.label}")
        logger.info(f"Interval: {summary.interval}{' (rollover)' if budget.rollover else ''}")
        logger.info(f"Limit: {format_money(summary.limit, currency)}")
        logger.info(f"Spent: {format_money(summary.spent, currency)} ({summary.progress}%)")
        logger.info(f"Remaining: {format_money(summary.remaining, currency)}")
        logger.info("-" * 80)

    logger.info(f"\nTotal budgets: {len(budgets)}")


def cmd_create(args, services):
    """Create a budget for a wallet or one of its categories."""
    state = create_budget_action(
        services,
        {
            "wallet_id": args.wallet,
            "category_id": args.category,
            "limit": args.limit,
            "interval": args.interval,
            "rollover": args.rollover,
        },
    )
    report(state)


def cmd_delete(args, services):
    """Delete a budget by ID."""
    if services.budgets.delete(args.budget_id):
        logger.info(f"✓ Budget {args.budget_id} deleted.")
    else:
        logger.error(f"Budget with ID {args.budget_id} not found.")
        sys.exit(1)


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Manage budgets",
        description="Create, list and delete spending budgets",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    # budgets list
    list_parser = budgets_subparsers.add_parser("list", help="List a wallet's budgets")
    list_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    list_parser.set_defaults(func=cmd_list)

    # budgets create
    create_parser = budgets_subparsers.add_parser("create", help="Create a budget")
    create_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    create_parser.add_argument("limit", help="Spending ceiling, e.g. 400")
    create_parser.add_argument(
        "--category", help="Category ID to scope the budget to (omit for the whole wallet)"
    )
    create_parser.add_argument(
        "--interval",
        choices=["monthly", "quarterly", "yearly", "custom"],
        default="monthly",
        help="Budget interval (default monthly)",
    )
    create_parser.add_argument(
        "--rollover", action="store_true", help="Carry unspent budget into the next interval"
    )
    create_parser.set_defaults(func=cmd_create)

    # budgets delete
    delete_parser = budgets_subparsers.add_parser("delete", help="Delete a budget")
    delete_parser.add_argument("budget_id", type=int, help="Budget ID")
    delete_parser.set_defaults(func=cmd_delete)
