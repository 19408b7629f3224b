#!/usr/bin/env python3

import sys
from datetime import date
from dateutil.relativedelta import relativedelta
from cli.common import format_money
from tools.trends import monthly_trend
from logger import get_logger

logger = get_logger()


def cmd_trend(args, services):
    """Show monthly income, expenses and net for a wallet."""
    wallet = services.wallets.find(args.wallet)
    if wallet is None:
        logger.error(f"Wallet with ID {args.wallet} not found.")
        sys.exit(1)

    if args.months < 1:
        logger.error("--months must be at least 1.")
        sys.exit(1)

    end_month = date.today().replace(day=1)
    start_month = end_month - relativedelta(months=args.months - 1)
    transactions = services.transactions.find_by_wallet(
        wallet.id,
        start_date=start_month,
        end_date=end_month + relativedelta(months=1, days=-1),
    )

    currency = wallet.default_currency
    logger.info(f"\nMonthly trend for {wallet.name}:")
    logger.info("=" * 80)
    logger.info(f"{'Month':<10} {'Income':>18} {'Expenses':>18} {'Net':>18}")
    for point in monthly_trend(transactions, start_month, end_month):
        logger.info(
            f"{point.month_label:<10} "
            f"{format_money(point.income, currency):>18} "
            f"{format_money(point.expenses, currency):>18} "
            f"{format_money(point.net, currency):>18}"
        )


def setup_parser(subparsers):
    """Setup reports subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "reports",
        help="Wallet reports",
        description="Reports over a wallet's transaction history",
    )

    reports_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available report commands",
        dest="subcommand",
        required=True,
    )

    trend_parser = reports_subparsers.add_parser(
        "trend", help="Monthly income/expense trend"
    )
    trend_parser.add_argument("--wallet", type=int, required=True, help="Wallet ID")
    trend_parser.add_argument(
        "--months", type=int, default=6, help="Number of months to include (default 6)"
    )
    trend_parser.set_defaults(func=cmd_trend)
